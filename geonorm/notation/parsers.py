"""Notation parsers: DD, DMS and DDM tokens to :class:`AngleValue`.

Each parser is a pure function ``(token, axis) -> AngleValue`` that raises a
single :class:`~geonorm.errors.ParseError` subclass on failure. A parser never
falls back to another notation: a DD token handed to the DMS parser is a
:class:`~geonorm.errors.StructuralMismatchError`, which is how a file mixing
notations is detected.

Grammars (whitespace between parts is optional)::

    DD   [+-]D[.d][e[+-]x]       48.858056, -2.294444
    DMS  D° M' S[.s]" H          48°51'29.6"N, 48° 51′ 29″ N
    DDM  D° M[.m]' H             48°51.4'N, 2° 17.652′ E

``H`` is N/S for latitude and E/W/O for longitude (``O`` is French *Ouest*
and reads as West). Direction letters are case-insensitive.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from geonorm.errors import (
    MalformedNumberError,
    MinutesOutOfRangeError,
    OutOfRangeError,
    ParseError,
    SecondsOutOfRangeError,
    StructuralMismatchError,
)
from geonorm.geo import AngleValue, Axis, Direction

from .tokenizer import Marker, contains_marker, scan_integer, scan_real, split_segments

_DMS_SHAPE = (Marker.DEGREE, Marker.MINUTE, Marker.SECOND)
_DDM_SHAPE = (Marker.DEGREE, Marker.MINUTE)


@dataclass(frozen=True)
class _Components:
    """Notation-level pieces of a sexagesimal token before promotion."""

    degrees: int
    minutes: float
    seconds: float
    direction: Direction


def _build_angle(degrees: float, axis: Axis, token: str) -> AngleValue:
    try:
        return AngleValue(degrees, axis)
    except ParseError as exc:
        raise type(exc)(exc.detail, token) from None


def _promote(parts: _Components, axis: Axis, token: str) -> AngleValue:
    """Check sexagesimal ranges and convert to signed decimal degrees."""
    if not 0 <= parts.minutes < 60:
        msg = f"minutes {parts.minutes:g} not in [0, 60)"
        raise MinutesOutOfRangeError(msg, token)
    if not 0 <= parts.seconds < 60:
        msg = f"seconds {parts.seconds:g} not in [0, 60)"
        raise SecondsOutOfRangeError(msg, token)

    bound = axis.max_degrees
    at_bound_with_rest = parts.degrees == bound and (parts.minutes > 0 or parts.seconds > 0)
    if parts.degrees > bound or at_bound_with_rest:
        msg = f"{parts.degrees}°{parts.minutes:g}'{parts.seconds:g}\" exceeds {bound:g}° for {axis.value}"
        raise OutOfRangeError(msg, token)

    magnitude = parts.degrees + parts.minutes / 60.0 + parts.seconds / 3600.0
    return _build_angle(parts.direction.sign * magnitude, axis, token)


def _split(token: str, shape: tuple[Marker, ...], notation: str) -> tuple[list[str], str]:
    split = split_segments(token)
    if split.markers != shape:
        pattern = "".join(f"<{m.name.lower()}>{m.value}" for m in shape) + "<dir>"
        msg = f"expected {notation} pattern {pattern}"
        raise StructuralMismatchError(msg, token)
    return [segment.text for segment in split.segments], split.tail


def _degrees(text: str, token: str) -> int:
    degrees = scan_integer(text)
    if degrees is None:
        msg = f"degrees {text!r} is not a non-negative integer" if text else "missing degrees"
        raise MalformedNumberError(msg, token)
    return degrees


def _direction(tail: str, axis: Axis, token: str) -> Direction:
    if len(tail) > 1:
        msg = f"unexpected trailing content {tail!r}"
        raise StructuralMismatchError(msg, token)
    return Direction.from_letter(tail, axis, token)


def parse_dd(token: str, axis: Axis) -> AngleValue:
    """Parse a signed decimal-degree token.

    Args:
        token: Text such as ``"48.858056"`` or ``"-0.1278"``.
        axis: Axis the value belongs to.

    Returns:
        AngleValue: The validated value.

    Raises:
        StructuralMismatchError: If the token carries DMS/DDM marker glyphs.
        MalformedNumberError: If the token is not a finite decimal number.
        OutOfRangeError: If the value is outside the axis bound, including
            exponents too large for a float.
    """
    text = token.strip()
    if contains_marker(text):
        msg = "decimal degrees cannot carry degree/minute/second markers"
        raise StructuralMismatchError(msg, token)
    value = scan_real(text, exponent=True)
    if value is None:
        msg = f"{text!r} is not a decimal number" if text else "empty value"
        raise MalformedNumberError(msg, token)
    if not math.isfinite(value):
        msg = f"{text} overflows the {axis.value} bound"
        raise OutOfRangeError(msg, token)
    return _build_angle(value, axis, token)


def parse_dms(token: str, axis: Axis) -> AngleValue:
    """Parse a degrees/minutes/seconds token such as ``48°51'29.6"N``.

    Degrees and minutes are integers, seconds is a real. The degree glyph,
    both the minute and second markers, and the direction letter are all
    required.

    Raises:
        StructuralMismatchError: If the token does not follow the DMS grammar.
        MalformedNumberError: If a numeric field is empty or not a number.
        MissingDirectionError: If the direction letter is absent or invalid.
        MinutesOutOfRangeError: If minutes is outside ``[0, 60)``.
        SecondsOutOfRangeError: If seconds is outside ``[0, 60)``.
        OutOfRangeError: If the magnitude exceeds the axis bound.
    """
    (deg_text, min_text, sec_text), tail = _split(token, _DMS_SHAPE, "DMS")

    degrees = _degrees(deg_text, token)
    minutes = scan_integer(min_text, signed=True)
    if minutes is None:
        msg = f"minutes {min_text!r} is not an integer" if min_text else "missing minutes"
        raise MalformedNumberError(msg, token)
    seconds = scan_real(sec_text)
    if seconds is None:
        msg = f"seconds {sec_text!r} is not a number" if sec_text else "missing seconds"
        raise MalformedNumberError(msg, token)
    direction = _direction(tail, axis, token)

    return _promote(_Components(degrees, float(minutes), seconds, direction), axis, token)


def parse_ddm(token: str, axis: Axis) -> AngleValue:
    """Parse a degrees/decimal-minutes token such as ``48°51.4'N``.

    Raises:
        StructuralMismatchError: If the token does not follow the DDM grammar.
        MalformedNumberError: If a numeric field is empty or not a number.
        MissingDirectionError: If the direction letter is absent or invalid.
        MinutesOutOfRangeError: If minutes is outside ``[0, 60)``.
        OutOfRangeError: If the magnitude exceeds the axis bound.
    """
    (deg_text, min_text), tail = _split(token, _DDM_SHAPE, "DDM")

    degrees = _degrees(deg_text, token)
    minutes = scan_real(min_text)
    if minutes is None:
        msg = f"minutes {min_text!r} is not a number" if min_text else "missing minutes"
        raise MalformedNumberError(msg, token)
    direction = _direction(tail, axis, token)

    return _promote(_Components(degrees, minutes, 0.0, direction), axis, token)
