"""GPX import.

Components:
    extract: Coordinates of every ``trkpt``/``wpt`` in a GPX byte string
    extract_file: Same, reading the document from disk
    parse_degrees: Strict decimal-degree parser shared with text entry

Typical Usage:
    >>> from simlocate.gpx import extract_file
    >>> waypoints = extract_file("morning_run.gpx") or []
"""

from .extractor import POINT_ELEMENTS, extract, extract_file, parse_degrees

__all__ = ["POINT_ELEMENTS", "extract", "extract_file", "parse_degrees"]
