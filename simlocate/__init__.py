"""Simulated GPS location control for iOS Simulator devices.

simlocate holds the logic behind a simulator "Location" panel. It lets you
pick a coordinate, move it along a heading, jitter it, or play back a GPX
track, and it turns each of those into ``set location`` requests for a
device. Talking to the simulator is delegated to a ``LocationSink``. The
package never spawns processes itself.

Components:
    Geographic Systems (simlocate.geo):
        • GeoPoint: immutable latitude/longitude value type
        • project: great-circle destination from bearing and distance
        • track_length: WGS84 polyline length via pyproj

    GPX Import (simlocate.gpx):
        • extract / extract_file: trkpt and wpt coordinates in document order

    Playback (simlocate.playback):
        • PlaybackDriver: IDLE / JITTERING / SIMULATING, one emission per tick
        • PlaybackSnapshot: state pushed to subscribers after every change

    Panel (simlocate.panel):
        • LocationPanel: text entry, heading moves, GPX import, activation

    Support:
        • simlocate.unit: type-safe angles, distances, durations
        • simlocate.state: validated state machine
        • simlocate.timer: Ticker, the single periodic scheduler
        • simlocate.device: LocationSink protocol, recording and console sinks
        • simlocate.config: defaults and PanelConfig

Usage:
    >>> from simlocate import LocationPanel
    >>> from simlocate.device import RecordingSink
    >>> sink = RecordingSink()
    >>> panel = LocationPanel("booted", sink)
    >>> panel.import_gpx("commute.gpx")
    >>> panel.toggle_simulate()          # first waypoint sent immediately
    >>> panel.ticker.run(until=lambda: panel.mode.name == "IDLE")
"""

from simlocate.geo import GeoPoint, project
from simlocate.panel import LocationPanel
from simlocate.playback import PlaybackDriver, PlaybackMode

__version__ = "0.1.0"

__all__ = ["GeoPoint", "LocationPanel", "PlaybackDriver", "PlaybackMode", "project"]
