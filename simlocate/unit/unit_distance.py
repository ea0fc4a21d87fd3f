"""Distance units for heading moves and track lengths.

Distances are stored in meters. The heading control accepts metric or
imperial input; ``Foot`` exists so imperial input is converted once, at the
edge, instead of leaking a second scale into the projector.

Classes:
    Meter: SI distance unit and family root.
    Kilometer: 1000 meters.
    Foot: International foot, 0.3048 meters.

Type Aliases:
    Length: Union type for all distance units.

Example:
    >>> Kilometer(6371).to(Meter)
    6371000.0
    >>> float(Foot(1000))
    304.8
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: Meter (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Distance unit: Kilometer (1000 meters)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class Foot(Meter):
    """Distance unit: international foot (0.3048 meters)."""

    SCALE_TO_SI = 0.3048
    SYMBOL = "ft"


Length = Meter | Kilometer | Foot
