"""Float-backed units with SI storage.

``UnitFloat`` is a ``float`` holding its value in the SI unit of its family
(radians, meters, seconds). Constructors take the value in the unit's own
scale, so ``Kilometer(6371)`` is stored as ``6371000.0`` and ``Degree(90)``
as ``pi / 2``. Plain ``float()`` always yields the SI value, which is what
the trigonometry in ``simlocate.geo`` consumes.

Example:
    >>> from simlocate.unit import Foot, Meter
    >>> d = Foot(656)
    >>> round(float(d), 2)  # meters
    199.95
    >>> d.to(Meter)
    199.9488
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Base class for float units converted to SI on construction.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Multiplier from this unit to SI.
        IS_FAMILY_ROOT (ClassVar[bool]): True; concrete families override it.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a unit from a value expressed in this unit's scale.

        Args:
            value: Numeric value in the unit's native scale.
        """
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance from a value already in SI units."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the value expressed in ``unit_type``'s scale.

        Raises:
            TypeError: If ``unit_type`` is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Re-type this value as ``unit_type`` (same family only)."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a plain number.

        Raises:
            TypeError: If ``k`` is not a plain number.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError(f"cannot scale {type(self).__name__} by {type(k).__name__}")

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        """Divide by a plain number.

        Raises:
            TypeError: If ``k`` is not a plain number.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError(f"cannot divide {type(self).__name__} by {type(k).__name__}")

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    # -------------------------------- Comparison Operations --------------------------------
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
        """Compare by SI value.

        Units must belong to the same family; bare numbers are compared with
        the SI value.
        """
        if isinstance(other, Unit):
            self._check_same_root(type(other))
            return float(self) == float(other)
        return float(self) == other

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value and symbol in the unit's own scale (e.g. "25.0 °")."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
