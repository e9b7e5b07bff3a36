"""Human-readable views of decoded transaction contracts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .address import Address

_ADDRESS_FIELDS = frozenset(
    {"OwnerAddress", "ReceiverAddress", "ToAddress", "ContractAddress"}
)


def _address_text(value: Any) -> str:
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError(f"address field must be bytes, got {type(value).__name__}")
    return str(Address(bytes(value)))


def parse_contract_human_readable(contract: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of a contract's fields with addresses in base58.

    Internal ``XXX_`` fields are dropped and a ``Votes`` list becomes a
    mapping of witness address to vote count.
    """
    result: dict[str, Any] = {}
    for name, value in contract.items():
        if name.startswith("XXX_"):
            continue
        if name in _ADDRESS_FIELDS:
            value = _address_text(value)
        result[name] = value

    if "Votes" in result:
        result["Votes"] = {
            _address_text(vote["VoteAddress"]): vote["VoteCount"]
            for vote in result["Votes"] or ()
        }
    return result