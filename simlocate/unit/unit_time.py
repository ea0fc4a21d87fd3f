"""Time units for tick intervals.

Classes:
    Second: SI time unit and family root.
    Millisecond: 1/1000 second.
    Minute: 60 seconds.

Type Aliases:
    Time: Union type for all time units.

Example:
    >>> Millisecond(250).to(Second)
    0.25
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Second(UnitFloat):
    """Time unit: Second (SI base unit for time)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"


class Millisecond(Second):
    """Time unit: Millisecond."""

    SCALE_TO_SI = 0.001
    SYMBOL = "ms"


class Minute(Second):
    """Time unit: Minute (60 seconds)."""

    SCALE_TO_SI = 60.0
    SYMBOL = "min"


Time = Second | Millisecond | Minute
