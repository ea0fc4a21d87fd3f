"""Command line front end.

Sub-commands mirror the panel's controls::

    simlocate set    DEVICE LAT LON
    simlocate move   DEVICE --bearing 90 --distance 500 [--unit ft]
    simlocate jitter DEVICE --ticks 10
    simlocate play   DEVICE track.gpx [--realtime]

Each ``set location`` request is printed as the ``simctl`` command line it
stands for (``location <deviceId> <lat> <lon>``); running it is left to the
caller, e.g. ``xcrun simctl $(simlocate ... | tail -1)``.
"""

import argparse
import logging
import sys
import time
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from simlocate.config import (
    DEFAULT_BEARING,
    DEFAULT_DISTANCE,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    JITTER_RADIUS,
    TICK_INTERVAL,
    PanelConfig,
)
from simlocate.device import ConsoleSink
from simlocate.geo import track_length
from simlocate.panel import LocationPanel, MeasurementUnit
from simlocate.playback import PlaybackMode
from simlocate.unit import Degree, Kilometer, Meter, Second

CONSOLE = Console()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simlocate",
        description="Drive the simulated location of an iOS Simulator device.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="increase log verbosity (-v info, -vv debug)")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_origin(p: argparse.ArgumentParser) -> None:
        p.add_argument("--from", dest="origin", nargs=2, metavar=("LAT", "LON"),
                       default=(str(DEFAULT_LATITUDE), str(DEFAULT_LONGITUDE)),
                       help="base coordinate (default: %(default)s)")

    p = sub.add_parser("set", help="send one coordinate")
    p.add_argument("device")
    p.add_argument("latitude")
    p.add_argument("longitude")

    p = sub.add_parser("move", help="move along a bearing for a distance")
    p.add_argument("device")
    add_origin(p)
    p.add_argument("--bearing", type=float, default=DEFAULT_BEARING.degrees,
                   help="degrees clockwise from north (default: %(default)s)")
    p.add_argument("--distance", type=float, default=DEFAULT_DISTANCE.to(Meter),
                   help="distance in --unit (default: %(default)s)")
    p.add_argument("--unit", choices=[u.value for u in MeasurementUnit],
                   default=MeasurementUnit.METRIC.value)

    p = sub.add_parser("jitter", help="jitter around a coordinate")
    p.add_argument("device")
    add_origin(p)
    p.add_argument("--ticks", type=int, default=10)
    p.add_argument("--radius", type=float, default=JITTER_RADIUS,
                   help="max offset per axis in degrees (default: %(default)s)")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--realtime", action="store_true",
                   help="wait --interval seconds between ticks")
    p.add_argument("--interval", type=float, default=TICK_INTERVAL.to(Second))

    p = sub.add_parser("play", help="play back the waypoints of a GPX file")
    p.add_argument("device")
    p.add_argument("gpx")
    p.add_argument("--realtime", action="store_true",
                   help="wait --interval seconds between waypoints")
    p.add_argument("--interval", type=float, default=TICK_INTERVAL.to(Second))

    return parser


def _configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _make_panel(args: argparse.Namespace, **overrides) -> LocationPanel | None:
    interval = getattr(args, "interval", None)
    if interval is not None:
        if interval <= 0:
            CONSOLE.print("[red]--interval must be positive")
            return None
        overrides["tick_interval"] = Second(interval)
    panel = LocationPanel(args.device, ConsoleSink(CONSOLE), PanelConfig(**overrides))
    origin = getattr(args, "origin", None)
    if origin is not None and not panel.update_from_text(*origin):
        CONSOLE.print(f"[red]invalid coordinate: {origin[0]}, {origin[1]}")
        return None
    return panel


def _cmd_set(args: argparse.Namespace) -> int:
    panel = _make_panel(args)
    if panel is None:
        return 2
    if not panel.update_from_text(args.latitude, args.longitude):
        CONSOLE.print(f"[red]invalid coordinate: {args.latitude}, {args.longitude}")
        return 2
    panel.activate()
    return 0


def _cmd_move(args: argparse.Namespace) -> int:
    panel = _make_panel(args)
    if panel is None:
        return 2
    panel.move(Degree(args.bearing), args.distance, MeasurementUnit(args.unit))
    CONSOLE.print(f"Coordinates: {panel.location_text}")
    return 0


def _run_ticker(panel: LocationPanel, realtime: bool, **kwargs) -> int:
    sleep = time.sleep if realtime else (lambda _: None)
    return panel.ticker.run(sleep=sleep, **kwargs)


def _cmd_jitter(args: argparse.Namespace) -> int:
    panel = _make_panel(args, jitter_radius=args.radius, jitter_seed=args.seed)
    if panel is None:
        return 2
    panel.toggle_jitter()
    _run_ticker(panel, args.realtime, max_ticks=args.ticks)
    panel.toggle_jitter()
    CONSOLE.print(f"Coordinates: {panel.location_text}")
    return 0


def _cmd_play(args: argparse.Namespace) -> int:
    panel = _make_panel(args)
    if panel is None:
        return 2
    waypoints = panel.import_gpx(args.gpx)
    if not waypoints:
        CONSOLE.print(f"[red]no waypoints found in {args.gpx}")
        return 1

    table = Table(title="GPX import", show_header=False)
    table.add_row("File", args.gpx)
    table.add_row("Waypoints", str(len(waypoints)))
    table.add_row("Track length", f"{track_length(waypoints).to(Kilometer):.3f} km")
    table.add_row("Start", str(waypoints[0]))
    table.add_row("End", str(waypoints[-1]))
    CONSOLE.print(table)

    panel.toggle_simulate()
    try:
        _run_ticker(panel, args.realtime, until=lambda: panel.mode is PlaybackMode.IDLE)
    except KeyboardInterrupt:
        panel.ticker.stop()
        CONSOLE.print(f"[yellow]stopped at waypoint {panel.driver.cursor}/{len(waypoints)}")
        return 130
    CONSOLE.print(f"Played {panel.driver.cursor} waypoint(s); button: {panel.driver.button_label}")
    return 0


_COMMANDS = {
    "set": _cmd_set,
    "move": _cmd_move,
    "jitter": _cmd_jitter,
    "play": _cmd_play,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    return _COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
