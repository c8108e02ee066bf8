"""Small numeric helpers shared by the scoring and nutrition services."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def is_finite_number(value: object) -> bool:
    """True for real ints/floats that are not NaN or +/-inf (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round halves away from zero for positives (262.5 -> 263, 12.5 -> 13).
    Built-in round() uses banker's rounding, which would give 262 and 12.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    """Nearest integer, halves rounded up."""
    return int(round_half_up(value))


def bounded(value: object, lo: float, hi: float, default: float | None = None) -> float:
    """Clamp into [lo, hi]; non-numeric, NaN or infinite input becomes default (lo if unset)."""
    if not is_finite_number(value):
        return lo if default is None else default
    return clamp(float(value), lo, hi)
