"""Coordinate normalization and great-circle distance.

geonorm parses geographic coordinates written in decimal degrees (DD),
degrees/minutes/seconds (DMS) or degrees/decimal-minutes (DDM) into one
validated decimal-degree value, formats them back for display, and computes
Haversine distances and per-axis near-equality between point pairs.

Architecture:
    Leaf-first, every stage a pure function over immutable values:

    - Unit Layer (geonorm.unit): Degree/Radian and Meter/Kilometer/Mile floats
    - Value Layer (geonorm.geo): Axis, Direction, AngleValue, CoordinatePair
    - Notation Layer (geonorm.notation): DD/DMS/DDM parsers and formatters
    - Metrics (geonorm.distance, geonorm.proximity): Haversine and nearness
    - Driver (geonorm.pipeline, geonorm.main): CSV processing and CLI

    A token flows: raw text -> notation parser -> AngleValue (or ParseError)
    -> distance / proximity / formatters -> output values.

Error Model:
    Parsers raise one ParseError subclass per failure kind
    (MalformedNumber, MissingDirection, MinutesOutOfRange, SecondsOutOfRange,
    OutOfRange, StructuralMismatch). try_parse_coordinate returns the same
    outcome as data. Distance and proximity never fail on valid values.

Example:
    >>> from geonorm import Axis, Notation, CoordinatePair, parse_coordinate
    >>> from geonorm import compute_distance, format_as_dms
    >>> lat = parse_coordinate("48° 51′ 29″ N", Axis.LATITUDE, Notation.DMS)
    >>> lon = parse_coordinate("2°17'40\\"E", Axis.LONGITUDE, Notation.DMS)
    >>> format_as_dms(lat)
    '48°51\\'29.0"N'
    >>> eiffel = CoordinatePair(lat, lon, "Eiffel Tower")
"""

from .distance import Distance, compute_distance, haversine_km
from .errors import (
    ErrorKind,
    MalformedNumberError,
    MinutesOutOfRangeError,
    MissingDirectionError,
    OutOfRangeError,
    ParseError,
    SecondsOutOfRangeError,
    StructuralMismatchError,
)
from .geo import AngleValue, Axis, CoordinatePair, Direction
from .notation import (
    Notation,
    ParseResult,
    format_as_dd,
    format_as_ddm,
    format_as_dms,
    parse_coordinate,
    try_parse_coordinate,
)
from .proximity import Nearly, evaluate_proximity

__version__ = "0.1.0"

__all__ = [
    # Values
    "Axis",
    "Direction",
    "AngleValue",
    "CoordinatePair",
    # Notations
    "Notation",
    "ParseResult",
    "parse_coordinate",
    "try_parse_coordinate",
    "format_as_dd",
    "format_as_dms",
    "format_as_ddm",
    # Metrics
    "Distance",
    "compute_distance",
    "haversine_km",
    "Nearly",
    "evaluate_proximity",
    # Errors
    "ErrorKind",
    "ParseError",
    "MalformedNumberError",
    "MissingDirectionError",
    "MinutesOutOfRangeError",
    "SecondsOutOfRangeError",
    "OutOfRangeError",
    "StructuralMismatchError",
]
