from datetime import datetime, timezone

import pytest

from tronkit.proposals import ProposalError, is_expired, parse_proposal_params


def test_parse_single_entry():
    assert parse_proposal_params(["1:100"]) == {1: 100}


def test_parse_several_entries():
    assert parse_proposal_params(["1:100", "2:5", "30:0"]) == {1: 100, 2: 5, 30: 0}


def test_parse_empty_list():
    assert parse_proposal_params([]) == {}


def test_collision_raises():
    with pytest.raises(ProposalError, match="proposal colision"):
        parse_proposal_params(["1:100", "1:200"])


def test_zero_value_can_be_replaced():
    assert parse_proposal_params(["4:0", "4:7"]) == {4: 7}


@pytest.mark.parametrize("entry", ["1", "1:2:3", ""])
def test_bad_format(entry):
    with pytest.raises(ProposalError, match="invalid proposal"):
        parse_proposal_params([entry])


def test_bad_id():
    with pytest.raises(ProposalError, match="invalid param ID"):
        parse_proposal_params(["x:1"])


def test_bad_value():
    with pytest.raises(ProposalError, match="invalid vote count"):
        parse_proposal_params(["1:abc"])


def test_value_out_of_int64_range():
    with pytest.raises(ProposalError):
        parse_proposal_params(["1:9223372036854775808"])


def test_expired_in_past():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    past_ms = int(now.timestamp()) * 1000 - 5000
    assert is_expired(past_ms, now) is True


def test_not_expired_in_future():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    future_ms = int(now.timestamp()) * 1000 + 5000
    assert is_expired(future_ms, now) is False


def test_same_second_is_not_expired():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    same_ms = int(now.timestamp()) * 1000 + 999
    assert is_expired(same_ms, now) is False


def test_default_now_uses_current_time():
    assert is_expired(0) is True