"""Code-point tokenizer shared by the DMS and DDM parsers.

Tokens are walked one Unicode code point at a time. Marker glyphs, including
their multi-byte Unicode variants, are looked up in a fixed table and
replaced by a canonical :class:`Marker`; the text between markers becomes a
raw field for numeric extraction. Numbers are recognized by an explicit
ASCII scanner rather than ``float()``, which would also accept ``nan``,
``inf``, underscores and non-ASCII digits.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Marker(Enum):
    """Canonical unit marker following a numeric field."""

    DEGREE = "°"
    MINUTE = "'"
    SECOND = '"'


GLYPHS: dict[str, Marker] = {
    "°": Marker.DEGREE,
    "'": Marker.MINUTE,
    "′": Marker.MINUTE,  # U+2032 PRIME
    '"': Marker.SECOND,
    "″": Marker.SECOND,  # U+2033 DOUBLE PRIME
}

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")


@dataclass(frozen=True)
class Segment:
    """Raw text of one field and the marker that closed it."""

    text: str
    marker: Marker


@dataclass(frozen=True)
class SplitToken:
    segments: tuple[Segment, ...]
    tail: str

    @property
    def markers(self) -> tuple[Marker, ...]:
        return tuple(segment.marker for segment in self.segments)


def contains_marker(token: str) -> bool:
    return any(ch in GLYPHS for ch in token)


def split_segments(token: str) -> SplitToken:
    """Split ``token`` on marker glyphs.

    Whitespace around each field is insignificant and stripped.

    Example:
        >>> split = split_segments("48° 51′ 29″ N")
        >>> [s.text for s in split.segments], split.tail
        (['48', '51', '29'], 'N')
    """
    segments: list[Segment] = []
    buffer: list[str] = []
    for ch in token:
        marker = GLYPHS.get(ch)
        if marker is None:
            buffer.append(ch)
            continue
        segments.append(Segment("".join(buffer).strip(), marker))
        buffer = []
    return SplitToken(tuple(segments), "".join(buffer).strip())


def _scan_digits(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def scan_integer(text: str, *, signed: bool = False) -> int | None:
    """Return ``text`` as an int when it is a plain ASCII integer, else None."""
    pos = 1 if signed and text[:1] in _SIGNS else 0
    end = _scan_digits(text, pos)
    if end == pos or end != len(text):
        return None
    return int(text)


def scan_real(text: str, *, signed: bool = True, exponent: bool = False) -> float | None:
    """Return ``text`` as a float when it is a plain ASCII decimal, else None.

    Accepted shape: ``[sign] digits [. digits]`` or ``[sign] . digits``, with
    an optional ``e``/``E`` exponent when ``exponent`` is set.
    """
    pos = 1 if signed and text[:1] in _SIGNS else 0
    int_end = _scan_digits(text, pos)
    digits = int_end - pos
    end = int_end
    if end < len(text) and text[end] == ".":
        frac_end = _scan_digits(text, end + 1)
        digits += frac_end - (end + 1)
        end = frac_end
    if digits == 0:
        return None
    if exponent and end < len(text) and text[end] in "eE":
        exp_start = end + 1
        if exp_start < len(text) and text[exp_start] in _SIGNS:
            exp_start += 1
        exp_end = _scan_digits(text, exp_start)
        if exp_end == exp_start:
            return None
        end = exp_end
    if end != len(text):
        return None
    return float(text)
