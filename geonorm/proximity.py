"""Per-axis near-equality of two points under an absolute tolerance.

Comparison is done on raw decimal-degree differences, before any output
rounding. The default tolerance of ``1e-6`` degrees is about 0.11 m at the
equator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from geonorm.config import DEFAULT_TOLERANCE_DEG
from geonorm.geo import CoordinatePair


@dataclass(frozen=True)
class Nearly:
    """Near-equality flags for latitude, longitude and both together."""

    lat: bool
    lon: bool
    both: bool


def nearly_equal_deg(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE_DEG) -> bool:
    """True iff ``|a - b| < tolerance``."""
    return abs(a - b) < tolerance


def evaluate_proximity(
    point_a: CoordinatePair,
    point_b: CoordinatePair,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
) -> Nearly:
    """Compare two points axis by axis.

    Args:
        point_a: First point.
        point_b: Second point.
        tolerance: Absolute tolerance in decimal degrees (strict ``<``).

    Returns:
        Nearly: ``lat`` and ``lon`` flags, and ``both`` when both hold.

    Raises:
        ValueError: If ``tolerance`` is negative or not finite.

    Example:
        >>> a = CoordinatePair.from_deg(10.0, 20.0)
        >>> b = CoordinatePair.from_deg(10.0000005, 20.5)
        >>> evaluate_proximity(a, b)
        Nearly(lat=True, lon=False, both=False)
    """
    if not math.isfinite(tolerance) or tolerance < 0:
        msg = f"tolerance must be a finite non-negative number, got {tolerance}"
        raise ValueError(msg)

    lat = nearly_equal_deg(point_a.latitude.degrees, point_b.latitude.degrees, tolerance)
    lon = nearly_equal_deg(point_a.longitude.degrees, point_b.longitude.degrees, tolerance)
    return Nearly(lat=lat, lon=lon, both=lat and lon)
