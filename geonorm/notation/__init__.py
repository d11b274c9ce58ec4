"""Coordinate notations: parsing into and formatting out of :class:`AngleValue`.

The notation is chosen once per run by the caller and passed explicitly to
every :func:`parse_coordinate` call; there is no global notation state and no
cross-notation fallback.

Components:
    Notation: DD, DMS or DDM
    parse_coordinate: Parse a token, raising a ParseError subclass on failure
    try_parse_coordinate: Same, returning a ParseResult instead of raising
    format_as_dd / format_as_dms / format_as_ddm: Display formatters

Typical Usage:
    >>> from geonorm.geo import Axis
    >>> from geonorm.notation import Notation, parse_coordinate, format_as_dd
    >>> lat = parse_coordinate("48°51'29.6\\"N", Axis.LATITUDE, Notation.DMS)
    >>> format_as_dd(lat)
    '48.858222'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from geonorm.errors import ParseError
from geonorm.geo import AngleValue, Axis

from .formatters import format_as_dd, format_as_ddm, format_as_dms
from .parsers import parse_dd, parse_ddm, parse_dms


class Notation(Enum):
    """Textual notation of coordinate tokens for a whole run."""

    DD = "dd"
    DMS = "dms"
    DDM = "ddm"

    @classmethod
    def from_name(cls, name: str) -> Notation:
        """Look up a notation by case-insensitive name (``"dms"``, ``"DDM"``...)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(n.value for n in cls)
            msg = f"unknown notation {name!r} (expected one of: {choices})"
            raise ValueError(msg) from None


Parser = Callable[[str, Axis], AngleValue]

_PARSERS: dict[Notation, Parser] = {
    Notation.DD: parse_dd,
    Notation.DMS: parse_dms,
    Notation.DDM: parse_ddm,
}


def parse_coordinate(token: str, axis: Axis, notation: Notation) -> AngleValue:
    """Parse ``token`` on ``axis`` using exactly the ``notation`` grammar.

    Raises:
        ParseError: One subclass per failure kind; see :mod:`geonorm.errors`.
    """
    return _PARSERS[notation](token, axis)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of :func:`try_parse_coordinate`: a value or an error, never both."""

    value: AngleValue | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> AngleValue:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


def try_parse_coordinate(token: str, axis: Axis, notation: Notation) -> ParseResult:
    """Parse like :func:`parse_coordinate` but return failures as data."""
    try:
        return ParseResult(value=parse_coordinate(token, axis, notation))
    except ParseError as exc:
        return ParseResult(error=exc)


__all__ = [
    "Notation",
    "ParseResult",
    "parse_coordinate",
    "try_parse_coordinate",
    "parse_dd",
    "parse_dms",
    "parse_ddm",
    "format_as_dd",
    "format_as_dms",
    "format_as_ddm",
]
