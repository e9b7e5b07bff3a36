import pytest

from tronkit.permissions import parse_permissions
from tronkit.votes import ParseError

CONTRACT_TYPES = [
    "TransferContract",
    "VoteWitnessContract",
    "UpdateBrokerageContract",
    "ShieldedTransferContract",
]


def test_owner_rule_parsed():
    owner, witness, actives = parse_permissions(["O:2:TA-1+TB-1"], CONTRACT_TYPES)
    assert owner == {"name": "owner", "threshold": 2, "keys": {"TA": 1, "TB": 1}}
    assert witness is None
    assert actives == []


def test_witness_rule_lowercase():
    owner, witness, actives = parse_permissions(["w:1:TW-1"], CONTRACT_TYPES)
    assert owner is None
    assert witness == {"name": "witness", "threshold": 1, "keys": {"TW": 1}}


def test_active_excludes_brokerage_and_shielded():
    _, _, actives = parse_permissions(["A:1:TA-1"], CONTRACT_TYPES)
    assert len(actives) == 1
    active = actives[0]
    assert active["name"] == "active0"
    assert active["operations"] == {"TransferContract": True, "VoteWitnessContract": True}
    assert active["keys"] == {"TA": 1}


def test_multiple_actives_collected():
    _, _, actives = parse_permissions(["A:1:TA-1", "a:2:TB-2"], CONTRACT_TYPES)
    assert [a["threshold"] for a in actives] == [1, 2]


def test_empty_list_rejected():
    with pytest.raises(ParseError, match="at least one rule"):
        parse_permissions([], CONTRACT_TYPES)


@pytest.mark.parametrize(
    "rules, message",
    [
        (["O:1"], "invalid format"),
        (["X:1:TA-1"], "invalid type"),
        (["O:abc:TA-1"], "invalid threshold"),
        (["O:1:TA"], "invalid key"),
        (["O:1:TA-x"], "invalid key"),
        (["O:1:TA-1", "O:1:TB-1"], "only one owner"),
        (["W:1:TA-1", "w:1:TB-1"], "only one witness"),
    ],
)
def test_invalid_rules(rules, message):
    with pytest.raises(ParseError, match=message):
        parse_permissions(rules, CONTRACT_TYPES)