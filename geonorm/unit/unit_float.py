"""Float-backed units stored internally in SI scale.

:class:`UnitFloat` subclasses ``float`` so unit values flow straight into
``math`` and NumPy functions, while keeping family checks on arithmetic and
comparisons. Values are stored in the SI unit of their family (radians for
angles, meters for lengths) and converted on demand.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SYMBOL = "m"
    >>> class Kilometer(Meter):
    ...     SCALE_TO_SI = 1000.0
    ...     SYMBOL = "km"
    >>> float(Kilometer(2.5))
    2500.0
    >>> Kilometer(2.5).to(Meter)
    2500.0
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Base class for float units with automatic SI conversion.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor from this unit to the SI unit.
        IS_FAMILY_ROOT (ClassVar[bool]): True for the base class itself.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a unit from a value expressed in this unit's own scale."""
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance from a value already in SI scale."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the value expressed in ``unit_type``'s scale.

        Args:
            unit_type: Target unit of the same family.

        Returns:
            float: Plain float in the target scale.

        Raises:
            TypeError: If ``unit_type`` belongs to another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Re-tag this value as ``unit_type`` without changing the quantity."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __mul__(self, k: Number) -> UnitFloat:
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        return NotImplemented

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        return NotImplemented

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __abs__(self) -> UnitFloat:
        return type(self).from_si(abs(float(self)))

    # -------------------------------- Comparisons --------------------------------
    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        """Compare in SI scale; a plain number is taken as an SI value."""
        if isinstance(other, Unit):
            self._check_same_root(type(other))
        elif not isinstance(other, Number):
            return NotImplemented
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value in the unit's own scale followed by its symbol (e.g. ``"5.0 km"``)."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
