"""Named geographic point built from two validated angle values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .angle import AngleValue
from .axis import Axis

if TYPE_CHECKING:
    from geonorm.distance import Distance
    from geonorm.proximity import Nearly


@dataclass(frozen=True)
class CoordinatePair:
    """One latitude and one longitude, optionally labeled.

    The pair is immutable; each CSV row creates two of them (point A and
    point B) and discards them once the row's outputs are written.

    Attributes:
        latitude (AngleValue): Value on the latitude axis.
        longitude (AngleValue): Value on the longitude axis.
        name (str): Free-form label carried through to output.

    Example:
        >>> paris = CoordinatePair.from_deg(48.8566, 2.3522, name="Paris")
        >>> london = CoordinatePair.from_deg(51.5074, -0.1278, name="London")
        >>> round(paris.distance_to(london).km)
        344
    """

    latitude: AngleValue
    longitude: AngleValue
    name: str = ""

    def __post_init__(self):
        if self.latitude.axis is not Axis.LATITUDE:
            msg = f"latitude slot holds a {self.latitude.axis.value} value"
            raise ValueError(msg)
        if self.longitude.axis is not Axis.LONGITUDE:
            msg = f"longitude slot holds a {self.longitude.axis.value} value"
            raise ValueError(msg)

    @classmethod
    def from_deg(cls, lat: float, lon: float, name: str = "") -> CoordinatePair:
        """Build a pair from decimal degrees, validating both values."""
        return cls(AngleValue.latitude(lat), AngleValue.longitude(lon), name)

    def distance_to(self, other: CoordinatePair) -> Distance:
        """Great-circle distance to ``other``; see :func:`geonorm.distance.compute_distance`."""
        from geonorm.distance import compute_distance

        return compute_distance(self, other)

    def nearly_equals(self, other: CoordinatePair, tolerance: float | None = None) -> Nearly:
        """Per-axis near-equality with ``other``; see :func:`geonorm.proximity.evaluate_proximity`."""
        from geonorm.proximity import evaluate_proximity

        if tolerance is None:
            return evaluate_proximity(self, other)
        return evaluate_proximity(self, other, tolerance)
