"""Angular units used to move coordinates into trigonometric space.

Angles are stored in radians. Coordinates arrive in decimal degrees, so the
Haversine engine wraps each degree value in :class:`Degree` and hands the
resulting float (already in radians) to the trigonometric functions.

Example:
    >>> from math import pi
    >>> float(Degree(180)) == pi
    True
    >>> Radian(pi).to(Degree)
    180.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: radian, the SI unit and root of the angle family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: degree, 1/360 of a full turn."""

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
