"""Witness (super representative) statistics and brokerage checks."""

from __future__ import annotations

import re

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


class WitnessError(ValueError):
    """Raised when a witness value is invalid."""


def witness_productivity(produced: int, missed: int) -> float:
    """Return the percentage of scheduled blocks a witness produced."""
    total = produced + missed
    if total > 0:
        return produced / total * 100
    return 0.0


def validate_brokerage(value: str | int) -> int:
    """Parse a brokerage commission and check it lies in 0..100."""
    if isinstance(value, bool):
        raise WitnessError(f"invalid brokerage {value!r}")
    if isinstance(value, str):
        if not _INT_RE.fullmatch(value):
            raise WitnessError(f"invalid syntax: {value!r}")
        number = int(value)
        if not _INT32_MIN <= number <= _INT32_MAX:
            raise WitnessError(f"value out of range: {value!r}")
    elif isinstance(value, int):
        number = value
    else:
        raise WitnessError(f"invalid brokerage {value!r}")
    if number < 0 or number > 100:
        raise WitnessError("Invalud Brokerage rande 0 > X < 100")
    return number