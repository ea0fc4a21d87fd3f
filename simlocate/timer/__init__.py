"""Periodic tick scheduling.

Components:
    Ticker: Fires a callback once per interval, driven by simulation time
        (``advance``) or by the wall clock (``run``).
"""

from .ticker import Ticker

__all__ = ["Ticker"]
