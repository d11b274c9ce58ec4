"""Canonical decimal-degree coordinate value.

:class:`AngleValue` is the single representation every notation parser
produces and every downstream component consumes. Construction is the only
validation point: an instance that exists is finite and within its axis
bound, so the distance engine, proximity evaluator and formatters never
re-check it.

Example:
    >>> paris = AngleValue.latitude(48.8566)
    >>> paris.direction
    <Direction.NORTH: 'N'>
    >>> AngleValue.longitude(181)
    Traceback (most recent call last):
    ...
    geonorm.errors.OutOfRangeError: OutOfRange: 181.0 is outside [-180, 180] for longitude
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from geonorm.errors import MalformedNumberError, OutOfRangeError
from geonorm.unit import Degree

from .axis import Axis, Direction


@dataclass(frozen=True)
class AngleValue:
    """A validated coordinate in decimal degrees tagged with its axis.

    Two values with equal ``(degrees, axis)`` compare and hash equal.

    Attributes:
        degrees (float): Signed decimal degrees (North/East positive).
        axis (Axis): Latitude or longitude.

    Raises:
        MalformedNumberError: If ``degrees`` is NaN or infinite.
        OutOfRangeError: If ``degrees`` is outside the axis bound.
    """

    degrees: float
    axis: Axis

    def __post_init__(self):
        degrees = float(self.degrees)
        if not math.isfinite(degrees):
            msg = f"{degrees} is not a finite number"
            raise MalformedNumberError(msg)
        if not self.axis.contains(degrees):
            bound = self.axis.max_degrees
            msg = f"{degrees} is outside [-{bound:g}, {bound:g}] for {self.axis.value}"
            raise OutOfRangeError(msg)
        object.__setattr__(self, "degrees", degrees)

    @classmethod
    def latitude(cls, degrees: float) -> AngleValue:
        return cls(degrees, Axis.LATITUDE)

    @classmethod
    def longitude(cls, degrees: float) -> AngleValue:
        return cls(degrees, Axis.LONGITUDE)

    @property
    def angle(self) -> Degree:
        """The value as a :class:`~geonorm.unit.Degree` unit."""
        return Degree(self.degrees)

    @property
    def direction(self) -> Direction:
        return Direction.for_value(self.degrees, self.axis)

    @property
    def magnitude(self) -> float:
        """Absolute value in degrees."""
        return abs(self.degrees)

    def __float__(self) -> float:
        return self.degrees
