"""Geographic coordinates and the great-circle projector.

This module defines the coordinate units (``Latitude``, ``Longitude``), the
immutable ``GeoPoint`` value type, and ``project``: the destination point
reached from an origin by travelling a distance along a constant initial
bearing on a spherical Earth of radius ``EARTH_RADIUS``.

The projector intentionally works on a sphere rather than the WGS84
ellipsoid, so the heading move lands where users of the panel have always
seen it land. Ellipsoidal distances (``GeoPoint.distance_to`` and
``track_length``) go through ``pyproj.Geod``.

Longitudes produced by ``project`` are not wrapped into ``[-180, 180]``; a
move across the antimeridian returns e.g. ``180.3`` rather than ``-179.7``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from math import asin, atan2, cos, sin

from pyproj import Geod

from simlocate.config import EARTH_RADIUS
from simlocate.unit import Angle, Degree, Kilometer, Length, Meter, Radian

# WGS84 geodesic calculator for track measurements
_WGS84 = Geod(ellps="WGS84")


class Latitude(Degree):
    """Latitude in degrees, stored in radians.

    Its own unit family, so it cannot be mixed with a ``Longitude`` or a
    bearing by accident. Valid values lie in ``[-90, 90]`` but the range is
    not enforced.
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°N/S"


class Longitude(Degree):
    """Longitude in degrees, stored in radians.

    Valid values lie in ``[-180, 180]``; values outside that range are kept
    as given.
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°E/W"


@dataclass(frozen=True)
class GeoPoint:
    """An immutable (latitude, longitude) pair.

    Attributes:
        latitude (Latitude): North/south position.
        longitude (Longitude): East/west position.

    Example:
        >>> park = GeoPoint.from_deg(37.323056, -122.031944)
        >>> round(park.lat_deg, 6)
        37.323056
        >>> north = park.project(Degree(0), Meter(1000))
        >>> round(north.lat_deg - park.lat_deg, 5)
        0.00899
    """

    latitude: Latitude
    longitude: Longitude

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> GeoPoint:
        """Create a GeoPoint from decimal degrees.

        Args:
            lat (float): Latitude, negative for south.
            lon (float): Longitude, negative for west.
        """
        return cls(Latitude(lat), Longitude(lon))

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> GeoPoint:
        """Create a GeoPoint from radians."""
        return cls(Latitude.from_si(lat), Longitude.from_si(lon))

    @property
    def lat_deg(self) -> float:
        return self.latitude.degrees

    @property
    def lon_deg(self) -> float:
        return self.longitude.degrees

    def offset(self, dlat: float, dlon: float) -> GeoPoint:
        """Return a point shifted by ``dlat``/``dlon`` decimal degrees."""
        return GeoPoint.from_deg(self.lat_deg + dlat, self.lon_deg + dlon)

    def project(self, bearing: Angle, distance: Length) -> GeoPoint:
        """Destination reached from this point; see ``project``."""
        return project(self, bearing, distance)

    def distance_to(self, other: GeoPoint) -> Meter:
        """WGS84 geodesic distance to ``other``.

        Example:
            >>> a = GeoPoint.from_deg(37.5665, 126.9780)
            >>> b = GeoPoint.from_deg(35.1796, 129.0756)
            >>> round(float(a.distance_to(b)) / 1000)
            325
        """
        _, _, dist = _WGS84.inv(
            float(self.longitude),
            float(self.latitude),
            float(other.longitude),
            float(other.latitude),
            radians=True,
        )
        return Meter(dist)

    def __str__(self) -> str:
        return f"{self.lat_deg:.5f}, {self.lon_deg:.5f}"


def project(origin: GeoPoint, bearing: Angle, distance: Length) -> GeoPoint:
    """Project ``origin`` along ``bearing`` for ``distance`` on a sphere.

    Uses the great-circle destination formula with Earth radius
    ``EARTH_RADIUS`` (6371 km)::

        δ  = d / R
        φ2 = asin(sin φ1 · cos δ + cos φ1 · sin δ · cos θ)
        λ2 = λ1 + atan2(sin θ · sin δ · cos φ1, cos δ − sin φ1 · sin φ2)

    The function is total over real inputs. A zero distance returns
    ``origin`` itself, and bearings outside ``[0, 360)`` behave like their
    equivalent inside it.

    Args:
        origin (GeoPoint): Starting point.
        bearing (Angle): Initial bearing, clockwise from true north. Plain
            numbers are read as degrees.
        distance (Length): Distance to travel. Plain numbers are read as
            meters.

    Returns:
        GeoPoint: The destination. Its longitude is not normalised.
    """
    if not isinstance(bearing, Radian):
        bearing = Degree(bearing)
    if not isinstance(distance, Meter):
        distance = Meter(distance)
    if float(distance) == 0:
        return origin

    delta = distance.to(Kilometer) / EARTH_RADIUS.to(Kilometer)
    theta = float(bearing)
    lat1 = float(origin.latitude)
    lon1 = float(origin.longitude)

    lat2 = asin(sin(lat1) * cos(delta) + cos(lat1) * sin(delta) * cos(theta))
    lon2 = lon1 + atan2(
        sin(theta) * sin(delta) * cos(lat1),
        cos(delta) - sin(lat1) * sin(lat2),
    )
    return GeoPoint.from_rad(lat2, lon2)


def track_length(points: Iterable[GeoPoint]) -> Meter:
    """Total WGS84 length of the polyline through ``points``.

    Fewer than two points yield zero.
    """
    points = list(points)
    if len(points) < 2:
        return Meter(0)
    return Meter(
        _WGS84.line_length(
            [float(p.longitude) for p in points],
            [float(p.latitude) for p in points],
            radians=True,
        )
    )
