"""Decimal rounding with half-away-from-zero semantics.

Python's built-in :func:`round` rounds halves to even, which would turn a
distance of ``0.125`` into ``0.12``. Output values are instead rounded the
way a person reads them: halves move away from zero.
"""

from __future__ import annotations

import math

from geonorm.config import MAX_ROUND_DECIMALS


def round_half_away(value: float, decimals: int = 0) -> float:
    """Round ``value`` to ``decimals`` places, halves away from zero.

    ``decimals`` is capped at ``MAX_ROUND_DECIMALS`` to keep the scale
    factor inside exact float range.

    Args:
        value: Number to round.
        decimals: Number of decimal places (negative values are treated as 0).

    Returns:
        float: The rounded value, carrying the sign of ``value``.

    Example:
        >>> round_half_away(1.23556, 2)
        1.24
        >>> round_half_away(-2.5)
        -3.0
    """
    precision = min(max(decimals, 0), MAX_ROUND_DECIMALS)
    factor = 10.0**precision
    scaled = abs(value) * factor
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return math.copysign(whole / factor, value)
