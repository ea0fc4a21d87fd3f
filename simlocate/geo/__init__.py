"""Geographic coordinates and projections.

Components:
    GeoPoint: Immutable latitude/longitude value type
    Latitude / Longitude: Coordinate units in degrees (stored as radians)
    project: Great-circle destination from an origin, bearing and distance
    track_length: WGS84 length of a polyline of GeoPoints

Typical Usage:
    >>> from simlocate.geo import GeoPoint, project
    >>> from simlocate.unit import Degree, Meter
    >>> origin = GeoPoint.from_deg(37.323056, -122.031944)
    >>> moved = project(origin, Degree(25), Meter(200))
"""

from .geo_point import GeoPoint, Latitude, Longitude, project, track_length

__all__ = ["GeoPoint", "Latitude", "Longitude", "project", "track_length"]
