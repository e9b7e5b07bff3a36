"""Parsing of account permission rules given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from .votes import ParseError

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_EXCLUDED_OPERATIONS = frozenset({"UpdateBrokerageContract", "ShieldedTransferContract"})


def _parse_int64(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return None
    return number


def _parse_threshold(text: str) -> int:
    threshold = _parse_int64(text)
    if threshold is None:
        raise ParseError(f"invalid threshold: {text}")
    return threshold


def _parse_keys(text: str) -> dict[str, int]:
    keys: dict[str, int] = {}
    for key in text.split("+"):
        parts = key.split("-")
        if len(parts) != 2:
            raise ParseError(f"invalid key: {key}")
        weight = _parse_int64(parts[1])
        if weight is None:
            raise ParseError(f"invalid key: {key}")
        keys[parts[0]] = weight
    return keys


def parse_permissions(
    permission_list: Iterable[str], contract_types: Iterable[str]
) -> tuple[dict[str, Any] | None, dict[str, Any] | None, list[dict[str, Any]]]:
    """Parse ``TYPE:THRESHOLD:ADDR-WEIGHT+ADDR-WEIGHT`` rules.

    Returns the owner permission, the witness permission (either may be
    None) and the list of active permissions. Active permissions allow
    every contract type in ``contract_types`` except brokerage updates
    and shielded transfers.
    """
    rules = list(permission_list)
    if not rules:
        raise ParseError("at least one rule is expected")

    operations = {
        name: True for name in contract_types if name not in _EXCLUDED_OPERATIONS
    }
    owner: dict[str, Any] | None = None
    witness: dict[str, Any] | None = None
    actives: list[dict[str, Any]] = []
    actives_counter = 0

    for rule in rules:
        parts = rule.split(":")
        if len(parts) != 3:
            raise ParseError(f"invalid format: {rule}")
        kind, threshold_text, keys_text = parts
        if kind in ("O", "o"):
            if owner is not None:
                raise ParseError("can have only one owner permission")
            owner = {
                "name": "owner",
                "threshold": _parse_threshold(threshold_text),
                "keys": _parse_keys(keys_text),
            }
        elif kind in ("W", "w"):
            if witness is not None:
                raise ParseError("can have only one witness permission")
            witness = {
                "name": "witness",
                "threshold": _parse_threshold(threshold_text),
                "keys": _parse_keys(keys_text),
            }
        elif kind in ("A", "a"):
            actives.append(
                {
                    "name": f"active{actives_counter}",
                    "threshold": _parse_threshold(threshold_text),
                    "keys": _parse_keys(keys_text),
                    "operations": dict(operations),
                }
            )
        else:
            raise ParseError(f"invalid type: {kind}")

    return owner, witness, actives