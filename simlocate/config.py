"""Defaults for the location panel and its playback driver.

Module-level constants hold the values the panel starts with; ``PanelConfig``
bundles them so a caller (the CLI, a test, an embedding UI) can override any
of them per panel instance without touching globals.

Example:
    >>> from simlocate.config import PanelConfig
    >>> from simlocate.unit import Millisecond
    >>> fast = PanelConfig(tick_interval=Millisecond(200), jitter_seed=7)
"""

from dataclasses import dataclass

from simlocate.unit import Degree, Kilometer, Meter, Second, Time

# Apple Park, the location a fresh simulator reports
DEFAULT_LATITUDE = 37.323056
DEFAULT_LONGITUDE = -122.031944

# Playback
TICK_INTERVAL = Second(1)
JITTER_RADIUS = 0.0001  # degrees, per axis

# Heading move
DEFAULT_BEARING = Degree(25)
DEFAULT_DISTANCE = Meter(200)

# Spherical Earth used by the projector
EARTH_RADIUS = Kilometer(6371)

# GPX import
MAX_GPX_BYTES = 8 * 1024 * 1024


@dataclass
class PanelConfig:
    """Per-panel configuration.

    Attributes:
        latitude: Initial base latitude in degrees.
        longitude: Initial base longitude in degrees.
        tick_interval: Period of the playback/jitter clock.
        jitter_radius: Max absolute jitter offset per axis, in degrees.
        jitter_seed: Seed for the jitter generator; None draws from OS entropy.
        bearing: Default heading for ``LocationPanel.move``.
        distance: Default distance for ``LocationPanel.move``.
        max_gpx_bytes: Files larger than this are treated as unreadable.
    """

    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    tick_interval: Time = TICK_INTERVAL
    jitter_radius: float = JITTER_RADIUS
    jitter_seed: int | None = None
    bearing: Degree = DEFAULT_BEARING
    distance: Meter = DEFAULT_DISTANCE
    max_gpx_bytes: int = MAX_GPX_BYTES
