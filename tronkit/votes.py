"""Parsing of amounts, resource types and witness votes from the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .address import AddressError, base58_to_address
from .models import ResourceCode

SUN_PER_TRX = 10**6
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class ParseError(ValueError):
    """Raised when command-line input cannot be parsed."""


def trx_to_sun(value: str | float) -> int:
    """Convert a TRX amount to sun, truncating toward zero."""
    try:
        amount = float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"invalid amount {value!r}") from exc
    return int(amount * SUN_PER_TRX)


def parse_resource_type(value: int) -> ResourceCode:
    """Map 0 to bandwidth and 1 to energy."""
    if value == 0:
        return ResourceCode.BANDWIDTH
    if value == 1:
        return ResourceCode.ENERGY
    raise ParseError("invalid resource. Use 0 for Bandwidth or 1 for Energy")


def _parse_int64(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def parse_votes(vote_list: Iterable[str]) -> dict[str, int]:
    """Parse ``witness:count`` entries into a mapping of address to votes."""
    votes: dict[str, int] = {}
    for vote in vote_list:
        parts = vote.split(":")
        if len(parts) != 2:
            raise ParseError(f"invalid vote {parts}")
        witness, count_text = parts
        if votes.get(witness, 0) > 0:
            raise ParseError(f"vote colision {witness}:{votes[witness]} -> {vote}")
        try:
            address = base58_to_address(witness)
        except AddressError as exc:
            raise ParseError(f"invalid address {witness}. {exc}") from exc
        try:
            count = _parse_int64(count_text)
        except ValueError as exc:
            raise ParseError(f"invalid vote count {count_text}. {exc}") from exc
        votes[str(address)] = count
    return votes