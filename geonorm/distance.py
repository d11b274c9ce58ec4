"""Great-circle distance on a spherical Earth (Haversine).

The kernel is written with NumPy so the same code serves a single pair of
points and whole columns of coordinates. :func:`compute_distance` is the
per-row entry point: it takes two validated :class:`CoordinatePair` objects
and cannot fail.

Formula::

    a = sin²(Δφ/2) + cos φ1 · cos φ2 · sin²(Δλ/2)
    c = 2 · atan2(√a, √(1−a))
    d = R · c                      R = 6371.0 km

Example:
    >>> from geonorm.geo import CoordinatePair
    >>> paris = CoordinatePair.from_deg(48.8566, 2.3522)
    >>> compute_distance(paris, paris)
    Distance(km=0.0, miles=0.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from geonorm.config import BASE_TYPE, DISTANCE_DECIMALS, EARTH_RADIUS_KM
from geonorm.rounding import round_half_away
from geonorm.unit import Kilometer, Mile

if TYPE_CHECKING:
    from geonorm.geo import CoordinatePair


@dataclass(frozen=True)
class Distance:
    """Distance between two points, rounded to two decimals.

    Attributes:
        km (float): Kilometers.
        miles (float): Statute miles.
    """

    km: float
    miles: float


def central_angle(phi1: BASE_TYPE, phi2: BASE_TYPE, d_phi: BASE_TYPE, d_lambda: BASE_TYPE) -> BASE_TYPE:
    """Haversine central angle in radians from radian inputs."""
    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    # float error can push a a hair past 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    return 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def haversine_km(lat1: BASE_TYPE, lon1: BASE_TYPE, lat2: BASE_TYPE, lon2: BASE_TYPE) -> BASE_TYPE:
    """Unrounded great-circle distance in km for decimal-degree inputs.

    Accepts scalars or NumPy arrays (broadcast element-wise). Inputs are
    assumed valid; no range checks are made here.

    Args:
        lat1, lon1: First point in decimal degrees.
        lat2, lon2: Second point in decimal degrees.

    Returns:
        Distance in kilometers, same shape as the inputs.
    """
    phi1, phi2 = np.radians(lat1), np.radians(lat2)
    d_lambda = np.radians(lon2) - np.radians(lon1)
    return EARTH_RADIUS_KM * central_angle(phi1, phi2, phi2 - phi1, d_lambda)


def compute_distance(point_a: CoordinatePair, point_b: CoordinatePair) -> Distance:
    """Haversine distance between two points in kilometers and miles.

    Both values are computed from the unrounded distance and then rounded
    to two decimals, halves away from zero.

    Args:
        point_a: First point.
        point_b: Second point.

    Returns:
        Distance: Rounded kilometers and miles.
    """
    phi1 = point_a.latitude.angle
    phi2 = point_b.latitude.angle
    d_lambda = point_b.longitude.angle - point_a.longitude.angle

    c = float(central_angle(float(phi1), float(phi2), float(phi2 - phi1), float(d_lambda)))
    km = Kilometer(EARTH_RADIUS_KM * c)

    return Distance(
        km=round_half_away(km.to(Kilometer), DISTANCE_DECIMALS),
        miles=round_half_away(km.to(Mile), DISTANCE_DECIMALS),
    )
