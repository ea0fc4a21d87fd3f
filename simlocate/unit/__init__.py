"""Type-safe units for angles, distances and durations.

Modules:
    - unit_base: ``Unit`` and the family root mechanism
    - unit_float: ``UnitFloat`` with SI storage and same-family arithmetic
    - unit_angle: Radian, Degree
    - unit_distance: Meter, Kilometer, Foot
    - unit_time: Second, Millisecond, Minute

Example:
    >>> from simlocate.unit import Degree, Foot, Meter
    >>> bearing = Degree(25)
    >>> distance = Foot(656).as_unit(Meter)
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Foot, Kilometer, Length, Meter
from .unit_float import UnitFloat
from .unit_time import Millisecond, Minute, Second, Time

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "Foot",
    "Length",
    # Time units
    "Second",
    "Millisecond",
    "Minute",
    "Time",
]
