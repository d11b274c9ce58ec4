"""Geographic value types.

Components:
    Axis: Latitude or longitude, with its bound and accepted direction letters
    Direction: North/South/East/West with the sign convention
    AngleValue: Validated decimal-degree value tagged with its axis
    CoordinatePair: Named point holding one latitude and one longitude

Typical Usage:
    >>> from geonorm.geo import AngleValue, CoordinatePair
    >>> lat = AngleValue.latitude(48.858056)
    >>> eiffel = CoordinatePair(lat, AngleValue.longitude(2.294444), "Eiffel Tower")
"""

from .angle import AngleValue
from .axis import Axis, Direction
from .point import CoordinatePair

__all__ = ["Axis", "Direction", "AngleValue", "CoordinatePair"]
