import json

from tronkit.models import Account, FrozenResource, ResourceCode, UnfrozenResource


def test_resource_codes_match_cli_numbers():
    assert ResourceCode(0) is ResourceCode.BANDWIDTH
    assert ResourceCode(1) is ResourceCode.ENERGY


def test_to_dict_uses_wire_keys():
    acc = Account(address="TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1", balance=5, unfreeze_left=3)
    data = acc.to_dict()
    assert data["address"] == "TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1"
    assert data["balance"] == 5
    assert data["countUnfreezeLeft"] == 3
    assert "unfreeze_left" not in data


def test_to_dict_has_every_field():
    data = Account().to_dict()
    assert {"assetList", "frozenList", "frozenListV2", "unfrozenList", "voteList"} <= set(data)
    assert {"bandwidthTotal", "maxCanDelegateEnergy", "withdrawableBalance"} <= set(data)


def test_nested_resources_serialised():
    acc = Account(
        frozen_resources=[FrozenResource(ResourceCode.ENERGY, 10, "TX", 99)],
        unfrozen_resources=[UnfrozenResource(ResourceCode.BANDWIDTH, 7, 42)],
    )
    data = acc.to_dict()
    assert data["frozenList"] == [
        {"Type": 1, "Amount": 10, "DelegateTo": "TX", "Expire": 99}
    ]
    assert data["unfrozenList"] == [{"Type": 0, "Amount": 7, "Expire": 42}]


def test_to_dict_json_round_trip():
    acc = Account(assets={"1000001": 12}, votes={"TW": 4}, is_witness=True)
    data = acc.to_dict()
    assert json.loads(json.dumps(data)) == data
    assert data["assetList"] == {"1000001": 12}


def test_to_dict_copies_maps():
    acc = Account(votes={"TW": 4})
    data = acc.to_dict()
    data["voteList"]["TW"] = 0
    assert acc.votes["TW"] == 4