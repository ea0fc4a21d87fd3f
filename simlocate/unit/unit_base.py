"""Unit family foundation for the coordinate and distance types.

Every quantity handled by simlocate (bearings, coordinates, distances, tick
intervals) is a ``Unit`` subclass. Each subclass belongs to a *family* whose
root class is resolved automatically from the MRO, and arithmetic or
comparison between units is only allowed inside one family. A ``Latitude``
can therefore never be added to a ``Meter``, and a ``Longitude`` cannot be
silently compared with a ``Latitude``.

Key Concepts:
- ROOT: the family root class, assigned in ``__init_subclass__``
- IS_FAMILY_ROOT: marks the class that starts a new family
- SYMBOL: display suffix used by ``__str__``

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Foot(Length):
    ...     pass
    >>> Foot.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units should derive from ``UnitFloat``; this class only carries
    the family bookkeeping.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Whether this class starts a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the family ROOT for a new subclass.

        The first ancestor (or the class itself) declaring
        ``IS_FAMILY_ROOT = True`` becomes the root. Classes without such an
        ancestor are their own root.
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
    def _check_same_root(cls, unit_type: type[Unit]):
        """Ensure ``unit_type`` belongs to the same family as ``cls``.

        Args:
            unit_type: The other unit type taking part in the operation.

        Raises:
            TypeError: If the two types belong to different families.
        """
        if cls.ROOT is not getattr(unit_type, "ROOT", None):
            msg = f"incompatible units: {cls.__name__} and {unit_type.__name__}"
            raise TypeError(msg)
