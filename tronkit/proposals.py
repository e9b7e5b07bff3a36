"""Parsing and status checks for network upgrade proposals."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime, timezone

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class ProposalError(ValueError):
    """Raised when proposal parameters are invalid."""


def _parse_int64(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def parse_proposal_params(entries: Iterable[str]) -> dict[int, int]:
    """Parse ``ID:VALUE`` entries into a mapping of parameter id to value."""
    proposals: dict[int, int] = {}
    for entry in entries:
        parts = entry.split(":")
        if len(parts) != 2:
            raise ProposalError(f"invalid proposal [{' '.join(parts)}]")
        id_text, value_text = parts
        try:
            param_id = _parse_int64(id_text)
        except ValueError as exc:
            raise ProposalError(f"invalid param ID: {id_text} {exc}") from exc
        if proposals.get(param_id, 0) > 0:
            raise ProposalError(
                f"proposal colision {param_id}:{proposals[param_id]} -> {entry}"
            )
        try:
            value = _parse_int64(value_text)
        except ValueError as exc:
            raise ProposalError(f"invalid vote count {value_text}. {exc}") from exc
        proposals[param_id] = value
    return proposals


def is_expired(expiration_ms: int, now: datetime | None = None) -> bool:
    """Tell whether a proposal expiring at ``expiration_ms`` is past ``now``.

    The expiration is cut to whole seconds before comparing.
    """
    seconds = abs(expiration_ms) // 1000
    if expiration_ms < 0:
        seconds = -seconds
    current = now if now is not None else datetime.now(timezone.utc)
    return seconds < current.timestamp()