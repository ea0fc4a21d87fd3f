"""Angular units for bearings and coordinates.

Angles are stored in radians. ``Degree`` is the scale users type into the
heading control and the scale GPX files use, so most values enter the system
as degrees and leave it as radians for the trigonometry.

Classes:
    Radian: SI angle unit and family root.
    Degree: 1/360 of a full turn.

Type Aliases:
    Angle: Union type for all angular units (Radian | Degree).

Example:
    >>> heading = Degree(90)  # due east
    >>> float(heading)
    1.5707963267948966
    >>> heading.degrees
    90.0
"""

from __future__ import annotations

from math import degrees, pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    Attributes:
        IS_FAMILY_ROOT (bool): True, this is the root angular unit.
        SCALE_TO_SI (float): 1.0.
        SYMBOL (str): "rad".
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"

    @property
    def degrees(self) -> float:
        """The angle in decimal degrees."""
        return degrees(float(self))


class Degree(Radian):
    """Angular unit: Degree, converted to radians on construction.

    Bearings are degrees clockwise from true north; values outside
    ``[0, 360)`` are accepted as-is since every consumer is trigonometric.

    Attributes:
        SCALE_TO_SI (float): pi/180.
        SYMBOL (str): "°".
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
