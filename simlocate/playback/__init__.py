"""Jitter and waypoint playback.

Exports:
    PlaybackDriver: Mode state machine emitting one location per tick
    PlaybackMode: IDLE / JITTERING / SIMULATING
    PlaybackSnapshot: Immutable view passed to listeners
    button_label: Simulate button label for a mode and cursor position
"""

from .driver import PlaybackDriver, PlaybackMode, PlaybackSnapshot, button_label

__all__ = ["PlaybackDriver", "PlaybackMode", "PlaybackSnapshot", "button_label"]
