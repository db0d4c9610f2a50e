from __future__ import annotations

import logging
from typing import Optional

from tickrate.clock import Clock, monotonic_clock
from tickrate.interfaces import RateCounter, validate_window_size

logger = logging.getLogger(__name__)


class FixedCycleRateCounter(RateCounter):
    """Rate recalculated once every ``window_size`` ticks.

    Cheaper than :class:`~tickrate.counters.rolling.RollingRateCounter`
    since it keeps only an accumulator, but :meth:`rate` reports the value
    frozen at the last completed cycle, so it reacts to a change in rate
    only after a full cycle has passed.
    """

    def __init__(self, window_size: int, *, clock: Optional[Clock] = None) -> None:
        self._window_size = validate_window_size(window_size)
        self._clock = clock or monotonic_clock
        self._accumulated = 0.0
        self._tick_in_cycle = 0
        self._rate = 0.0
        self._last_instant: Optional[float] = None
        self._last_interval = 0.0
        self._cycle_started: Optional[float] = None
        logger.debug("Created fixed-cycle rate counter over %d cycles", window_size)

    def update(self) -> None:
        now = self._clock()
        last = self._last_instant
        self._last_instant = now
        if last is None:
            self._cycle_started = now
            return
        elapsed = now - last
        self._last_interval = elapsed
        self._accumulated += elapsed
        self._tick_in_cycle += 1
        if self._tick_in_cycle >= self._window_size:
            self._close_cycle(now)

    def _close_cycle(self, now: float) -> None:
        if self._accumulated > 0.0:
            self._rate = self._tick_in_cycle / self._accumulated
        else:
            self._rate = 0.0
        self._accumulated = 0.0
        self._tick_in_cycle = 0
        self._cycle_started = now

    def rate(self) -> float:
        return self._rate

    def measure(self) -> float:
        return self._last_interval

    def cycles(self) -> int:
        return self._window_size

    def set_cycles(self, window_size: int) -> None:
        self._window_size = validate_window_size(window_size)
        if self._tick_in_cycle >= window_size:
            # A non-empty cycle implies a baseline was recorded.
            self._close_cycle(self._last_instant or 0.0)
        logger.debug("Resized fixed-cycle rate counter to %d cycles", window_size)

    def rate_age_cycles(self) -> int:
        """Ticks recorded since the rate was last recalculated."""

        return self._tick_in_cycle

    def rate_age(self) -> float:
        """Seconds since the last cycle boundary. Reads the clock."""

        if self._cycle_started is None:
            return 0.0
        return self._clock() - self._cycle_started


__all__ = ["FixedCycleRateCounter"]
