"""
Numeric Primitives.

Small, pure helpers shared by the ratio, growth and signal code.
Functions that can have "no value" return None instead of a sentinel
number.
"""

from __future__ import annotations

from typing import Optional, Sequence


def median(values: Sequence[float]) -> Optional[float]:
    """
    Median of a sequence.

    Returns None for an empty input. The input is never mutated.
    """
    if not values:
        return None

    ordered = sorted(values)
    n = len(ordered)
    mid = n // 2
    if n % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def percentile_rank(value: float, reference: Sequence[float]) -> float:
    """
    Percentage of reference values strictly below value (0-100).

    Ties are not counted as below. An empty reference set yields 50.
    """
    if not reference:
        return 50.0

    below = sum(1 for v in reference if value > v)
    return below / len(reference) * 100


def percentile_in_range(value: float, min: float, max: float) -> float:
    """
    Position of value within [min, max] on a 0-100 scale, clamped.

    A degenerate range (max <= min) yields 50.
    """
    if max <= min:
        return 50.0

    percentile = (value - min) / (max - min) * 100
    return clamp(percentile, 0.0, 100.0)


def clamp(value: float, min: float, max: float) -> float:
    """Restrict value to [min, max]."""
    if value < min:
        return min
    if value > max:
        return max
    return value


def safe_divide(numerator: float, denominator: float) -> float:
    """Quotient, or 0 when the denominator is exactly zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def growth_rate(current: float, previous: float) -> Optional[float]:
    """
    Percentage growth from previous to current.

    Returns None when previous <= 0.
    """
    if previous <= 0:
        return None
    return (current - previous) / previous * 100
