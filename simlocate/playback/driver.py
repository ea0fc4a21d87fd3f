"""Waypoint playback and jitter driver.

The driver owns the state behind the location panel's automatic behaviours
and reacts to two kinds of stimulus:

* ``tick()``, called once per interval by a ``simlocate.timer.Ticker``
* user commands: ``toggle_jitter()``, ``toggle_simulate()``, ``activate()``

Modes:
    IDLE: ticks do nothing.
    JITTERING: every tick emits the base coordinate plus a uniform random
        offset of at most ``jitter_radius`` degrees per axis. The base is
        left unchanged.
    SIMULATING: every tick emits the next imported waypoint and recentres
        the base on it. When the list is exhausted the next tick emits
        nothing and the driver goes back to IDLE.

The modes are mutually exclusive. Turning one on while the other is running
switches over, so at most one ``set location`` is emitted per tick.

Turning simulation on emits the next waypoint immediately rather than
waiting for the next tick. If the previous run reached the end of the list,
the cursor is rewound first.

Listeners registered with ``subscribe`` receive a ``PlaybackSnapshot`` after
every command and every tick, which is how a UI follows the driver without
the driver knowing about the UI.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, auto

import numpy as np

from simlocate.config import PanelConfig
from simlocate.device import LocationSink
from simlocate.geo import GeoPoint
from simlocate.state import Action, StateMachine

logger = logging.getLogger(__name__)


class PlaybackMode(Enum):
    IDLE = auto()
    JITTERING = auto()
    SIMULATING = auto()


@dataclass(frozen=True)
class PlaybackSnapshot:
    """Read-only view of the driver, handed to listeners.

    Attributes:
        mode: Current playback mode.
        cursor: Index of the next waypoint to play.
        total: Number of imported waypoints.
        base: Coordinate the map is centred on.
        jittered: Last jittered coordinate, None unless jittering.
        pinned: Coordinate last sent to the device, None before the first.
        button_label: Label of the simulate button for this state.
    """

    mode: PlaybackMode
    cursor: int
    total: int
    base: GeoPoint
    jittered: GeoPoint | None
    pinned: GeoPoint | None
    button_label: str

    @property
    def displayed(self) -> GeoPoint:
        return self.jittered or self.base


Listener = Callable[[PlaybackSnapshot], object]


def button_label(mode: PlaybackMode, cursor: int, total: int) -> str:
    """Label for the simulate button.

    "Stop" while simulating; otherwise "Restart" once every waypoint has
    been played, "Resume" part way through, and "Start" before the first.
    """
    if mode is PlaybackMode.SIMULATING:
        return "Stop"
    if cursor == total:
        return "Restart"
    if cursor > 0:
        return "Resume"
    return "Start"


class PlaybackDriver:
    """Jitter and waypoint playback state machine for one device.

    Attributes:
        device_id (str): UDID passed to every ``set_location`` call.
        sink (LocationSink): Receiver of ``set_location`` calls.
        jitter_radius (float): Max absolute jitter offset per axis, degrees.
    """

    def __init__(
        self,
        device_id: str,
        sink: LocationSink,
        config: PanelConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        """Create an idle driver centred on the configured coordinate.

        Args:
            device_id: Simulator UDID.
            sink: Receiver of ``set_location`` calls.
            config: Panel configuration. Uses defaults if None.
            rng: Random generator for jitter. Seeded from
                ``config.jitter_seed`` if None.
        """
        config = config or PanelConfig()
        self.device_id = device_id
        self.sink = sink
        self.jitter_radius = config.jitter_radius
        self._rng = rng if rng is not None else np.random.default_rng(config.jitter_seed)

        self._base = GeoPoint.from_deg(config.latitude, config.longitude)
        self._jittered: GeoPoint | None = None
        self._pinned: GeoPoint | None = None
        self._waypoints: tuple[GeoPoint, ...] = ()
        self._cursor = 0
        self._listeners: list[Listener] = []

        mode = PlaybackMode
        self._machine = StateMachine(
            mode.IDLE,
            {
                mode.IDLE: {Action(mode.JITTERING), Action(mode.SIMULATING)},
                mode.JITTERING: {
                    Action(mode.IDLE, self._clear_jitter),
                    Action(mode.SIMULATING, self._clear_jitter),
                },
                mode.SIMULATING: {Action(mode.IDLE), Action(mode.JITTERING)},
            },
        )

    # ------------------------------------------------------------------ state
    @property
    def mode(self) -> PlaybackMode:
        return self._machine.current

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def waypoints(self) -> tuple[GeoPoint, ...]:
        return self._waypoints

    @property
    def base(self) -> GeoPoint:
        return self._base

    @property
    def jittered(self) -> GeoPoint | None:
        return self._jittered

    @property
    def pinned(self) -> GeoPoint | None:
        """Coordinate last sent to the device (the map marker)."""
        return self._pinned

    @property
    def displayed(self) -> GeoPoint:
        """Coordinate shown to the user: the jittered one if any, else the base."""
        return self._jittered or self._base

    @property
    def location_text(self) -> str:
        return f"{self.displayed.lat_deg:.5f}, {self.displayed.lon_deg:.5f}"

    @property
    def button_label(self) -> str:
        return button_label(self.mode, self._cursor, len(self._waypoints))

    @property
    def exhausted(self) -> bool:
        """True once every waypoint has been played."""
        return self._cursor == len(self._waypoints)

    def snapshot(self) -> PlaybackSnapshot:
        return PlaybackSnapshot(
            mode=self.mode,
            cursor=self._cursor,
            total=len(self._waypoints),
            base=self._base,
            jittered=self._jittered,
            pinned=self._pinned,
            button_label=self.button_label,
        )

    # -------------------------------------------------------------- listeners
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # --------------------------------------------------------------- commands
    def set_base(self, point: GeoPoint) -> None:
        """Move the base coordinate without contacting the device."""
        self._base = point
        self._notify()

    def load_waypoints(self, points: Iterable[GeoPoint]) -> None:
        """Replace the waypoint list and rewind the cursor.

        A running simulation is stopped, since its position no longer refers
        to the new list.
        """
        self._waypoints = tuple(points)
        self._cursor = 0
        if self.mode is PlaybackMode.SIMULATING:
            self._transition(PlaybackMode.IDLE)
        logger.info("loaded %d waypoint(s)", len(self._waypoints))
        self._notify()

    def toggle_jitter(self) -> None:
        """Start jittering, or stop and revert the display to the base."""
        if self.mode is PlaybackMode.JITTERING:
            self._transition(PlaybackMode.IDLE)
        else:
            self._transition(PlaybackMode.JITTERING)
        self._notify()

    def toggle_simulate(self) -> None:
        """Start or stop waypoint playback.

        Starting rewinds an exhausted cursor and plays the next waypoint
        immediately.
        """
        if self.mode is PlaybackMode.SIMULATING:
            self._transition(PlaybackMode.IDLE)
        else:
            if self.exhausted:
                self._cursor = 0
            self._transition(PlaybackMode.SIMULATING)
            self._step()
        self._notify()

    def activate(self) -> GeoPoint:
        """Send the displayed coordinate to the device, whatever the mode.

        Returns:
            GeoPoint: The coordinate that was sent.
        """
        coordinate = self.displayed
        self._emit(coordinate)
        self._notify()
        return coordinate

    def tick(self) -> None:
        """Advance the active mode by one clock period."""
        mode = self.mode
        if mode is PlaybackMode.SIMULATING:
            self._step()
        elif mode is PlaybackMode.JITTERING:
            self._jitter()
        else:
            self._jittered = None
        self._notify()

    # -------------------------------------------------------------- internals
    def _transition(self, mode: PlaybackMode) -> None:
        previous = self.mode
        self._machine.request_transition(mode)
        logger.info("playback %s -> %s", previous.name, mode.name)

    def _clear_jitter(self) -> None:
        self._jittered = None

    def _jitter(self) -> None:
        dlat, dlon = self._rng.uniform(-self.jitter_radius, self.jitter_radius, size=2)
        self._jittered = self._base.offset(float(dlat), float(dlon))
        self._emit(self._jittered)

    def _step(self) -> None:
        if self._cursor < len(self._waypoints):
            waypoint = self._waypoints[self._cursor]
            self._cursor += 1
            self._base = waypoint
            self._emit(waypoint)
        else:
            self._transition(PlaybackMode.IDLE)

    def _emit(self, point: GeoPoint) -> None:
        self._pinned = point
        logger.debug("emit %s for %s", point, self.device_id)
        self.sink.set_location(self.device_id, point.lat_deg, point.lon_deg)
