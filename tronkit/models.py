"""Detailed account views and their resource records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ResourceCode(IntEnum):
    """Resources that frozen TRX can grant."""

    BANDWIDTH = 0
    ENERGY = 1


@dataclass
class FrozenResource:
    """TRX frozen by an account, possibly delegated to another."""

    type: ResourceCode
    amount: int
    delegate_to: str = ""
    expire: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "Type": int(self.type),
            "Amount": self.amount,
            "DelegateTo": self.delegate_to,
            "Expire": self.expire,
        }


@dataclass
class UnfrozenResource:
    """TRX being unfrozen by an account."""

    type: ResourceCode
    amount: int
    expire: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"Type": int(self.type), "Amount": self.amount, "Expire": self.expire}


_JSON_KEYS = {
    "address": "address",
    "type": "type",
    "name": "name",
    "id": "id",
    "balance": "balance",
    "allowance": "allowance",
    "last_withdraw": "lastWithdraw",
    "is_witness": "isWitness",
    "is_elected": "isElected",
    "assets": "assetList",
    "tron_power": "tronPower",
    "tron_power_used": "tronPowerUsed",
    "frozen_balance": "frozenBalance",
    "frozen_resources": "frozenList",
    "frozen_balance_v2": "frozenBalanceV2",
    "frozen_resources_v2": "frozenListV2",
    "unfrozen_resources": "unfrozenList",
    "votes": "voteList",
    "bw_total": "bandwidthTotal",
    "bw_used": "bandwidthUsed",
    "energy_total": "energyTotal",
    "energy_used": "energyUsed",
    "rewards": "rewards",
    "withdrawable_balance": "withdrawableBalance",
    "unfreeze_left": "countUnfreezeLeft",
    "max_can_delegate_bandwidth": "maxCanDelegateBandwidth",
    "max_can_delegate_energy": "maxCanDelegateEnergy",
}


@dataclass
class Account:
    """A detailed view of an account."""

    address: str = ""
    type: str = ""
    name: str = ""
    id: str = ""
    balance: int = 0
    allowance: int = 0
    last_withdraw: int = 0
    is_witness: bool = False
    is_elected: bool = False
    assets: dict[str, int] = field(default_factory=dict)
    tron_power: int = 0
    tron_power_used: int = 0
    frozen_balance: int = 0
    frozen_resources: list[FrozenResource] = field(default_factory=list)
    frozen_balance_v2: int = 0
    frozen_resources_v2: list[FrozenResource] = field(default_factory=list)
    unfrozen_resources: list[UnfrozenResource] = field(default_factory=list)
    votes: dict[str, int] = field(default_factory=dict)
    bw_total: int = 0
    bw_used: int = 0
    energy_total: int = 0
    energy_used: int = 0
    rewards: int = 0
    withdrawable_balance: int = 0
    unfreeze_left: int = 0
    max_can_delegate_bandwidth: int = 0
    max_can_delegate_energy: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the account as a JSON-ready dict with its wire key names."""
        result: dict[str, Any] = {}
        for attr, key in _JSON_KEYS.items():
            value = getattr(self, attr)
            if isinstance(value, list):
                value = [item.to_dict() for item in value]
            elif isinstance(value, dict):
                value = dict(value)
            result[key] = value
        return result