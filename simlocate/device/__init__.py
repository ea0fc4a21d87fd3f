"""Device control collaborators.

Exports:
    LocationSink: Protocol for ``set_location(device_id, lat, lon)``
    LocationCommand: One recorded request, with its ``simctl`` argv
    RecordingSink: In-memory sink
    ConsoleSink: Sink printing each command with rich
"""

from .sink import ConsoleSink, LocationCommand, LocationSink, RecordingSink

__all__ = ["LocationSink", "LocationCommand", "RecordingSink", "ConsoleSink"]
