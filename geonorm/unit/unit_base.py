"""Unit family foundation for typed physical quantities.

Each physical quantity (angle, length) forms a family with one root class.
Subclasses inherit the root automatically through ``__init_subclass__``, and
operations are only allowed between units sharing the same root. This keeps
an angle from ever being added to a distance inside the Haversine engine.

Classes:
    Unit: Base class holding the family bookkeeping.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Mile(Length):
    ...     pass
    >>> Mile.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units should derive from :class:`~geonorm.unit.UnitFloat`
    rather than from this class directly.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        SYMBOL (ClassVar[str]): Display symbol.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the root of a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the family root for a newly declared unit class.

        The root is the class itself when it sets ``IS_FAMILY_ROOT``,
        otherwise the nearest ancestor in the MRO that does.
        """
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Ensure ``unit_type`` belongs to the same family as ``cls``.

        Raises:
            TypeError: If the families differ or ``unit_type`` is not a unit.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            msg = f"incompatible units: {cls.__name__} and {unit_type.__name__}"
            raise TypeError(msg)
