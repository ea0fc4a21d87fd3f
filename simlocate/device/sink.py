"""Outbound device control.

Everything the panel does to a simulator ends in exactly one call:
``set_location(device_id, latitude, longitude)``. The call is
fire-and-forget; nothing here observes or retries its outcome.

``LocationSink`` is the protocol the playback driver depends on. Two sinks
ship with the package:

* ``RecordingSink`` keeps every command in memory (tests, dry runs).
* ``ConsoleSink`` additionally prints the command line that would be handed
  to ``simctl``, i.e. ``location <deviceId> <lat> <lon>``.

Spawning ``xcrun simctl`` is left to the embedding application; a sink that
does so only needs ``LocationCommand.argv``.
"""

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from rich.console import Console

logger = logging.getLogger(__name__)


def _degrees(value: float) -> str:
    # 8 decimals is ~1 mm; drop the noise left by radian round-trips
    return f"{value:.8f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class LocationCommand:
    """One ``set location`` request.

    Attributes:
        device_id: Simulator UDID.
        latitude: Decimal degrees.
        longitude: Decimal degrees.
    """

    device_id: str
    latitude: float
    longitude: float

    @property
    def argv(self) -> list[str]:
        """Arguments for ``simctl``: ``location <deviceId> <lat> <lon>``."""
        return ["location", self.device_id, _degrees(self.latitude), _degrees(self.longitude)]

    def __str__(self) -> str:
        return " ".join(self.argv)


@runtime_checkable
class LocationSink(Protocol):
    """Receiver of ``set location`` requests."""

    def set_location(self, device_id: str, latitude: float, longitude: float) -> None: ...


class RecordingSink:
    """Sink that remembers every command it receives."""

    def __init__(self) -> None:
        self.commands: list[LocationCommand] = []

    def set_location(self, device_id: str, latitude: float, longitude: float) -> None:
        command = LocationCommand(device_id, latitude, longitude)
        logger.debug("set location: %s", command)
        self.commands.append(command)

    @property
    def last(self) -> LocationCommand | None:
        return self.commands[-1] if self.commands else None

    def clear(self) -> None:
        self.commands.clear()


class ConsoleSink(RecordingSink):
    """Sink that prints each ``simctl`` command line to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console()

    def set_location(self, device_id: str, latitude: float, longitude: float) -> None:
        super().set_location(device_id, latitude, longitude)
        self.console.print(f"[cyan]simctl[/cyan] {self.last}", highlight=False)
