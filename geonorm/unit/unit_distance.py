"""Length units for great-circle distances.

Lengths are stored in meters. The Haversine engine produces a
:class:`Kilometer` value and converts it to statute miles through
:class:`Mile`, whose scale is tied to the fixed ``KM_TO_MILES`` factor so that
``Kilometer(x).to(Mile)`` equals ``x * KM_TO_MILES``.

Example:
    >>> Kilometer(100).to(Mile)  # doctest: +ELLIPSIS
    62.1371...
"""

from __future__ import annotations

from geonorm.config import KM_TO_MILES

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: meter, the SI unit and root of the length family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: kilometer (1000 m)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class Mile(Meter):
    """Length unit: statute mile, defined through ``KM_TO_MILES``."""

    SCALE_TO_SI = 1000.0 / KM_TO_MILES
    SYMBOL = "mi"


Length = Meter | Kilometer | Mile
