"""
Decimal Utilities
orbit/scoring/utils.py

Provides precision-safe decimal math for scoring calculations.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def mean(values: List[Decimal]) -> Decimal:
    """
    Arithmetic mean.

    Returns Decimal("0") for an empty list.
    """
    if not values:
        return Decimal("0")
    return sum(values, Decimal("0")) / Decimal(len(values))


def round2(value: Decimal) -> float:
    """Round half-up to two places and return a float for API payloads."""
    return float(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
