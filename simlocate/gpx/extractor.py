"""Coordinate extraction from GPX documents.

Only two things are read from a GPX file: the ``lat`` and ``lon`` attributes
of every ``trkpt`` (track point) and ``wpt`` (waypoint) element, in document
order. Routes, elevations, timestamps, metadata and extensions are ignored.

The document is streamed with ``xml.etree.ElementTree.iterparse`` on start
events, so points are collected as their opening tags are seen and the tree
is never kept.

Failure handling:
    * unreadable input or XML that is not well-formed -> ``None``
    * a well-formed document without matching elements -> ``[]``
    * a matching element with a missing or non-numeric ``lat``/``lon`` is
      skipped on its own; the rest of the document is still read

Element names are matched on their local name, so the usual default
namespace (``http://www.topografix.com/GPX/1/1``) does not get in the way.
"""

import io
import logging
import re
import xml.etree.ElementTree as ET
from math import isfinite
from os import PathLike

from simlocate.config import MAX_GPX_BYTES
from simlocate.geo import GeoPoint

logger = logging.getLogger(__name__)

POINT_ELEMENTS = frozenset({"trkpt", "wpt"})

_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_degrees(text: str | None) -> float | None:
    """Parse a decimal-degree string strictly.

    Accepts plain decimal notation with ASCII digits, an optional sign and
    exponent. Surrounding whitespace, digit separators (``1_000``),
    non-ASCII digits, ``nan`` and ``inf`` are rejected, as is any value that
    overflows to infinity.

    Returns:
        float | None: The parsed value, or None when ``text`` is not a
        finite decimal number.

    Example:
        >>> parse_degrees("-122.031944")
        -122.031944
        >>> parse_degrees("12,5") is None
        True
    """
    if text is None or not _DECIMAL.fullmatch(text):
        return None
    value = float(text)
    if not isfinite(value):
        return None
    return value


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def extract(data: bytes) -> list[GeoPoint] | None:
    """Collect the coordinates of every ``trkpt``/``wpt`` element.

    Args:
        data (bytes): The raw GPX document.

    Returns:
        list[GeoPoint] | None: Points in document order, or None if the
        document is not well-formed XML.
    """
    points: list[GeoPoint] = []
    skipped = 0
    try:
        for _, element in ET.iterparse(io.BytesIO(data), events=("start",)):
            if _local_name(element.tag) not in POINT_ELEMENTS:
                continue
            lat = parse_degrees(element.get("lat"))
            lon = parse_degrees(element.get("lon"))
            if lat is None or lon is None:
                skipped += 1
                continue
            points.append(GeoPoint.from_deg(lat, lon))
    except ET.ParseError as e:
        logger.warning("GPX document is not well-formed: %s", e)
        return None

    if skipped:
        logger.debug("skipped %d GPX point(s) without a valid lat/lon", skipped)
    return points


def extract_file(
    path: str | PathLike[str], max_bytes: int = MAX_GPX_BYTES
) -> list[GeoPoint] | None:
    """Read ``path`` and extract its coordinates.

    Args:
        path: Location of the GPX file.
        max_bytes: Files larger than this are treated as unreadable.

    Returns:
        list[GeoPoint] | None: See ``extract``; also None when the file
        cannot be read or exceeds ``max_bytes``.
    """
    try:
        with open(path, "rb") as f:
            data = f.read(max_bytes + 1)
    except OSError as e:
        logger.warning("cannot read GPX file %s: %s", path, e)
        return None

    if len(data) > max_bytes:
        logger.warning("GPX file %s exceeds %d bytes", path, max_bytes)
        return None
    return extract(data)
