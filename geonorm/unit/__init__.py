"""Type-safe unit floats for angles and lengths.

The unit system keeps degrees, radians, kilometers and miles apart at
runtime. Values are stored in SI scale (radians, meters) and converted on
demand, and arithmetic between different families raises ``TypeError``.

Modules:
    - unit_base: ``Unit`` class with automatic family-root assignment
    - unit_float: ``UnitFloat`` with SI storage, arithmetic and comparisons
    - unit_angle: ``Radian`` (root) and ``Degree``
    - unit_distance: ``Meter`` (root), ``Kilometer`` and ``Mile``

Example:
    >>> from geonorm.unit import Degree, Kilometer, Mile
    >>> float(Degree(90))  # radians
    1.5707963267948966
    >>> round(Kilometer(344).to(Mile), 2)
    213.75
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter, Mile
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Length units
    "Meter",
    "Kilometer",
    "Mile",
    "Length",
]
