"""The location panel: every way of choosing where the simulator is.

``LocationPanel`` combines a ``PlaybackDriver`` with the panel's manual
inputs:

* typing a latitude and longitude (``update_from_text``)
* moving the base along a bearing for a distance (``move``)
* importing a GPX file for waypoint playback (``import_gpx``)
* the one-shot ``activate`` and the jitter/simulate toggles, which are
  forwarded to the driver

The panel also exposes the clock: ``ticker`` calls ``driver.tick`` once per
``PanelConfig.tick_interval``.

Example:
    >>> from simlocate.device import RecordingSink
    >>> panel = LocationPanel("booted", RecordingSink())
    >>> panel.update_from_text("51.5007", "-0.1246")
    True
    >>> destination = panel.move(Degree(90), Meter(500))
    >>> panel.location_text
    '51.50070, -0.11738'
"""

import logging
from enum import Enum
from os import PathLike

from simlocate.config import PanelConfig
from simlocate.device import LocationSink
from simlocate.geo import GeoPoint, project
from simlocate.gpx import extract, extract_file, parse_degrees
from simlocate.playback import PlaybackDriver, PlaybackMode
from simlocate.timer import Ticker
from simlocate.unit import Angle, Degree, Foot, Length, Meter, Radian

logger = logging.getLogger(__name__)

# Heading indicator circle, in points
MAX_MARKER_SIZE = 18.0
MIN_MARKER_SIZE = 4.0
_MARKER_MIN_DISTANCE = 100.0
_MARKER_MAX_DISTANCE = 1000.0


class MeasurementUnit(Enum):
    METRIC = "m"
    IMPERIAL = "ft"

    def length(self, value: float) -> Length:
        """Wrap a bare number typed in this unit."""
        return Meter(value) if self is MeasurementUnit.METRIC else Foot(value)


def marker_size(distance: float) -> float:
    """Diameter of the heading indicator's target circle.

    Short moves draw a large circle and long moves a small one: the distance
    is clamped to [100, 1000] and mapped linearly onto [18, 4].
    """
    clamped = min(max(distance, _MARKER_MIN_DISTANCE), _MARKER_MAX_DISTANCE)
    scaled = (clamped - _MARKER_MIN_DISTANCE) / (_MARKER_MAX_DISTANCE - _MARKER_MIN_DISTANCE)
    return MAX_MARKER_SIZE - scaled * (MAX_MARKER_SIZE - MIN_MARKER_SIZE)


class LocationPanel:
    """Location controls for one simulator device."""

    def __init__(
        self,
        device_id: str,
        sink: LocationSink,
        config: PanelConfig | None = None,
        driver: PlaybackDriver | None = None,
    ):
        self.config = config or PanelConfig()
        self.driver = driver or PlaybackDriver(device_id, sink, self.config)
        self.ticker = Ticker(self.config.tick_interval, self.driver.tick)
        self.source: str | None = None

    @property
    def device_id(self) -> str:
        return self.driver.device_id

    @property
    def location_text(self) -> str:
        return self.driver.location_text

    @property
    def mode(self) -> PlaybackMode:
        return self.driver.mode

    def update_from_text(self, latitude: str, longitude: str) -> bool:
        """Recentre the base on a typed coordinate.

        Nothing is applied unless both fields parse as decimal numbers.

        Returns:
            bool: Whether the base was updated.
        """
        lat = parse_degrees(latitude.strip())
        lon = parse_degrees(longitude.strip())
        if lat is None or lon is None:
            logger.debug("ignoring coordinate text %r, %r", latitude, longitude)
            return False
        self.driver.set_base(GeoPoint.from_deg(lat, lon))
        return True

    def move(
        self,
        bearing: Angle | float | None = None,
        distance: Length | float | None = None,
        unit: MeasurementUnit = MeasurementUnit.METRIC,
    ) -> GeoPoint:
        """Send the device along ``bearing`` for ``distance`` from the base.

        The destination is sent to the device and becomes the new base.

        Args:
            bearing: Heading, clockwise from north. Plain numbers are degrees.
                Defaults to ``config.bearing``.
            distance: How far to move. Plain numbers are read in ``unit``.
                Defaults to ``config.distance``.
            unit: Unit for a plain-number ``distance``.

        Returns:
            GeoPoint: The destination.
        """
        if bearing is None:
            bearing = self.config.bearing
        elif not isinstance(bearing, Radian):
            bearing = Degree(bearing)
        if distance is None:
            distance = self.config.distance
        elif not isinstance(distance, Meter):
            distance = unit.length(distance)

        destination = project(self.driver.base, bearing, distance)
        logger.info("move %s for %s to %s", bearing, distance, destination)
        self.driver.sink.set_location(
            self.device_id, destination.lat_deg, destination.lon_deg
        )
        self.driver.set_base(destination)
        return destination

    def import_gpx(self, source: str | PathLike[str] | bytes) -> tuple[GeoPoint, ...]:
        """Load waypoints from a GPX file path or raw GPX bytes.

        An unreadable or malformed document loads an empty list.

        Returns:
            tuple[GeoPoint, ...]: The waypoints now loaded.
        """
        if isinstance(source, bytes):
            points = extract(source)
            self.source = None
        else:
            points = extract_file(source, self.config.max_gpx_bytes)
            self.source = str(source)
        if points is None:
            logger.warning("GPX import failed; no waypoints loaded")
        self.driver.load_waypoints(points or [])
        return self.driver.waypoints

    def activate(self) -> GeoPoint:
        return self.driver.activate()

    def toggle_jitter(self) -> None:
        self.driver.toggle_jitter()

    def toggle_simulate(self) -> None:
        self.driver.toggle_simulate()
