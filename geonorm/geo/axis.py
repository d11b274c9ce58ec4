"""Coordinate axes and hemisphere directions.

An :class:`Axis` fixes the geographic bound and the set of direction letters
a coordinate may carry. A :class:`Direction` carries the sign convention:
North and East are positive, South and West are negative. The French letter
``O`` (Ouest) is accepted as West on input but never produced on output.

Example:
    >>> Direction.from_letter("O", Axis.LONGITUDE)
    <Direction.WEST: 'W'>
    >>> Direction.for_value(-33.9, Axis.LATITUDE).letter
    'S'
"""

from __future__ import annotations

from enum import Enum

from geonorm.config import MAX_LATITUDE, MAX_LONGITUDE
from geonorm.errors import MissingDirectionError


class Axis(Enum):
    """Latitude or longitude."""

    LATITUDE = "latitude"
    LONGITUDE = "longitude"

    @property
    def max_degrees(self) -> float:
        """Largest allowed magnitude in degrees (90 or 180)."""
        return MAX_LATITUDE if self is Axis.LATITUDE else MAX_LONGITUDE

    @property
    def letters(self) -> frozenset[str]:
        """Direction letters accepted on input for this axis."""
        return _INPUT_LETTERS[self]

    def contains(self, degrees: float) -> bool:
        """Return True when ``degrees`` lies within ``[-max, +max]``."""
        return -self.max_degrees <= degrees <= self.max_degrees


class Direction(Enum):
    """Hemisphere direction with its canonical output letter."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def letter(self) -> str:
        return self.value

    @property
    def sign(self) -> int:
        """+1 for North/East, -1 for South/West."""
        return -1 if self in (Direction.SOUTH, Direction.WEST) else 1

    @property
    def axis(self) -> Axis:
        if self in (Direction.NORTH, Direction.SOUTH):
            return Axis.LATITUDE
        return Axis.LONGITUDE

    @classmethod
    def from_letter(cls, letter: str, axis: Axis, token: str | None = None) -> Direction:
        """Resolve an input letter for ``axis``.

        Letters are case-insensitive. ``O`` maps to :attr:`WEST`.

        Args:
            letter: Single direction character taken from the token.
            axis: Axis the token is being parsed for.
            token: Original token, used in the error message.

        Returns:
            Direction: The matching direction.

        Raises:
            MissingDirectionError: If the letter is empty or not valid for the axis.
        """
        upper = letter.upper()
        if upper not in axis.letters:
            if not letter:
                msg = f"no direction letter for {axis.value}"
            else:
                msg = f"direction {letter!r} is not valid for {axis.value}"
            raise MissingDirectionError(msg, token)
        return _LETTER_TO_DIRECTION[upper]

    @classmethod
    def for_value(cls, degrees: float, axis: Axis) -> Direction:
        """Direction implied by the sign of ``degrees`` on ``axis`` (zero is N/E)."""
        if axis is Axis.LATITUDE:
            return cls.SOUTH if degrees < 0 else cls.NORTH
        return cls.WEST if degrees < 0 else cls.EAST


_INPUT_LETTERS = {
    Axis.LATITUDE: frozenset({"N", "S"}),
    Axis.LONGITUDE: frozenset({"E", "W", "O"}),
}

_LETTER_TO_DIRECTION = {
    "N": Direction.NORTH,
    "S": Direction.SOUTH,
    "E": Direction.EAST,
    "W": Direction.WEST,
    "O": Direction.WEST,
}
