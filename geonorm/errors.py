"""Typed parse failures for coordinate tokens.

Every parser in :mod:`geonorm.notation` either returns an
:class:`~geonorm.geo.AngleValue` or raises exactly one subclass of
:class:`ParseError`. The exceptions are ordinary ``ValueError`` subclasses so
callers can catch them per token and decide for themselves whether to skip the
row or abort the run.

Classes:
    ErrorKind: Enumeration of the failure categories.
    ParseError: Base class carrying the kind and the offending token.
    MalformedNumberError: A numeric sub-token is not a valid integer/real.
    MissingDirectionError: Direction letter absent or invalid for the axis.
    MinutesOutOfRangeError: Minutes outside ``[0, 60)``.
    SecondsOutOfRangeError: Seconds outside ``[0, 60)``.
    OutOfRangeError: Final magnitude outside the axis bound.
    StructuralMismatchError: Token does not follow the notation grammar.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a coordinate parse failure."""

    MALFORMED_NUMBER = "MalformedNumber"
    MISSING_DIRECTION = "MissingDirection"
    MINUTES_OUT_OF_RANGE = "MinutesOutOfRange"
    SECONDS_OUT_OF_RANGE = "SecondsOutOfRange"
    OUT_OF_RANGE = "OutOfRange"
    STRUCTURAL_MISMATCH = "StructuralMismatch"


class ParseError(ValueError):
    """Base class for all coordinate parse failures.

    Attributes:
        kind (ErrorKind): Category of the failure, fixed per subclass.
        token (str | None): The raw token that failed, when known.
        detail (str): Short human-readable description.
    """

    kind: ErrorKind

    def __init__(self, detail: str, token: str | None = None):
        self.detail = detail
        self.token = token
        msg = f"{self.kind.value}: {detail}"
        if token is not None:
            msg = f"{msg} (token {token!r})"
        super().__init__(msg)


class MalformedNumberError(ParseError):
    kind = ErrorKind.MALFORMED_NUMBER


class MissingDirectionError(ParseError):
    kind = ErrorKind.MISSING_DIRECTION


class MinutesOutOfRangeError(ParseError):
    kind = ErrorKind.MINUTES_OUT_OF_RANGE


class SecondsOutOfRangeError(ParseError):
    kind = ErrorKind.SECONDS_OUT_OF_RANGE


class OutOfRangeError(ParseError):
    kind = ErrorKind.OUT_OF_RANGE


class StructuralMismatchError(ParseError):
    kind = ErrorKind.STRUCTURAL_MISMATCH
