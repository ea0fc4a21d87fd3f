"""Periodic tick scheduler for the playback driver.

A single ``Ticker`` replaces the separate jitter and simulate clocks: it
calls one callback per elapsed interval, and the driver decides what that
tick means from its current mode.

Time can be supplied two ways:

* ``advance(dt)`` feeds simulation time, firing as many ticks as fit into
  the accumulated time. Tests and headless replays use this.
* ``run()`` ticks in real time, sleeping one interval between ticks.

Stopping is cooperative: ``stop()`` (or the ``until`` predicate) prevents the
next tick from being scheduled. No tick is ever in flight across intervals,
so there is nothing to abort.

Example:
    >>> ticks = []
    >>> ticker = Ticker(Second(1), lambda: ticks.append(1))
    >>> ticker.advance(Second(2.5))
    2
    >>> ticker.advance(Second(0.5))
    1
"""

import logging
import time
from collections.abc import Callable

from simlocate.unit import Second, Time

logger = logging.getLogger(__name__)

_ZERO_TIME = Second(0.0)


class Ticker:
    """Invoke ``callback`` once per ``interval``.

    Attributes:
        _interval (Time): Tick period.
        _elapsed (Time): Simulation time accumulated since the last tick.
        _running (bool): False once ``stop()`` has been called.
        _count (int): Ticks fired so far.
    """

    def __init__(self, interval: Time, callback: Callable[[], object]) -> None:
        """Create a running ticker.

        Raises:
            ValueError: If ``interval`` is not positive.
        """
        if interval <= _ZERO_TIME:
            raise ValueError(f"tick interval must be positive, got {interval}")
        self._interval = interval
        self._callback = callback
        self._elapsed = Second(0.0)
        self._running = True
        self._count = 0

    @property
    def interval(self) -> Time:
        return self._interval

    @property
    def running(self) -> bool:
        return self._running

    @property
    def count(self) -> int:
        """Number of ticks fired since creation."""
        return self._count

    def stop(self) -> None:
        """Stop scheduling ticks."""
        self._running = False

    def resume(self) -> None:
        """Allow ticks again; accumulated time starts from zero."""
        self._running = True
        self._elapsed = Second(0.0)

    def tick(self) -> None:
        """Fire one tick immediately, if running."""
        if not self._running:
            return
        self._count += 1
        self._callback()

    def advance(self, dt: Time) -> int:
        """Feed ``dt`` of simulation time and fire every tick that became due.

        Returns:
            int: Number of ticks fired by this call.
        """
        if not self._running:
            return 0
        self._elapsed += dt
        fired = 0
        while self._running and self._elapsed >= self._interval:
            self._elapsed -= self._interval
            self.tick()
            fired += 1
        return fired

    def run(
        self,
        max_ticks: int | None = None,
        until: Callable[[], bool] | None = None,
        sleep: Callable[[float], object] = time.sleep,
    ) -> int:
        """Tick in real time until stopped.

        The loop ends when ``stop()`` is called (from the callback or another
        observer), when ``until()`` returns True, or after ``max_ticks``.

        Args:
            max_ticks: Upper bound on ticks fired by this call.
            until: Predicate checked before every tick.
            sleep: Sleep function, replaceable for tests.

        Returns:
            int: Number of ticks fired by this call.
        """
        fired = 0
        logger.debug("ticker running every %s", self._interval)
        while self._running:
            if max_ticks is not None and fired >= max_ticks:
                break
            if until is not None and until():
                break
            if fired:
                sleep(self._interval.to(Second))
            self.tick()
            fired += 1
        return fired
