"""Amount handling and trade estimates for TRC10 bancor exchanges."""

from __future__ import annotations

import math

TRX_TOKEN_ID = "_"
TRX_DECIMALS = 6
_TRX_ALIASES = frozenset({"TRX", "0"})


class ExchangeError(ValueError):
    """Raised when exchange parameters are invalid."""


def _to_float(value: str | float) -> float:
    if isinstance(value, bool):
        raise ExchangeError(f"invalid token amount {value!r}")
    if isinstance(value, str):
        if "_" in value:
            raise ExchangeError(f"invalid syntax: {value!r}")
        try:
            return float(value)
        except ValueError as exc:
            raise ExchangeError(f"invalid syntax: {value!r}") from exc
    if isinstance(value, (int, float)):
        return float(value)
    raise ExchangeError(f"invalid token amount {value!r}")


def normalize_token(token_id: str, value: str | float) -> tuple[str, float]:
    """Check an amount and map TRX to the exchange's ``_`` token id.

    TRX amounts are converted to sun; other tokens are returned unchanged
    and still need scaling by their own precision.
    """
    amount = _to_float(value)
    if not amount > 0:
        raise ExchangeError("invalid token amount")
    if token_id in _TRX_ALIASES:
        return TRX_TOKEN_ID, amount * 10.0**TRX_DECIMALS
    return token_id, amount


def validate_pair(
    token_id1: str, value1: str | float, token_id2: str, value2: str | float
) -> tuple[tuple[str, float], tuple[str, float]]:
    """Check the two sides of a new exchange and normalize both."""
    amount1 = _to_float(value1)
    amount2 = _to_float(value2)
    if token_id1 == token_id2:
        raise ExchangeError("token ID cannot be the same")
    if not (amount1 > 0 and amount2 > 0):
        raise ExchangeError("invalid token amount")
    return normalize_token(token_id1, amount1), normalize_token(token_id2, amount2)


def expected_trade_amount(
    token_id: str,
    value: float,
    first_token_id: str,
    first_balance: int,
    second_token_id: str,
    second_balance: int,
    expected: float = 0,
    other_decimals: int | None = None,
) -> int:
    """Return the amount expected back from a trade.

    A non-zero ``expected`` is scaled by the precision of the token
    received (six when ``other_decimals`` is None); otherwise the amount
    is estimated from the pool balances and rounded to the nearest unit.
    """
    decimals = TRX_DECIMALS if other_decimals is None else other_decimals
    if token_id == first_token_id:
        numerator, denominator = first_balance + value, second_balance
    elif token_id == second_token_id:
        numerator, denominator = second_balance + value, first_balance
    else:
        raise ExchangeError(
            f"Token ID provided does not match excahnge "
            f"{first_token_id}/{second_token_id}"
        )

    if expected != 0:
        return int(expected * 10.0**decimals)

    if denominator == 0:
        if numerator == 0:
            raise ExchangeError("exchange has no liquidity")
        return 0
    ratio = float(numerator) / float(denominator)
    if ratio == 0:
        raise ExchangeError("exchange has no liquidity")
    return int(math.floor(value / ratio + 0.5))