from __future__ import annotations

import logging
import math
from typing import List, Optional

from tickrate.clock import Clock, monotonic_clock
from tickrate.interfaces import RateCounter, validate_window_size

logger = logging.getLogger(__name__)


class RollingRateCounter(RateCounter):
    """Rate averaged over the last ``window_size`` intervals.

    Intervals live in a preallocated ring with a running sum, so both
    :meth:`update` and :meth:`rate` run in constant time without allocating.
    Before the ring fills the average covers only the samples seen so far.
    """

    def __init__(self, window_size: int, *, clock: Optional[Clock] = None) -> None:
        self._window_size = validate_window_size(window_size)
        self._clock = clock or monotonic_clock
        self._intervals: List[float] = [0.0] * window_size
        self._cursor = 0
        self._count = 0
        self._total = 0.0
        self._last_instant: Optional[float] = None
        self._last_interval = 0.0
        logger.debug("Created rolling rate counter over %d cycles", window_size)

    def update(self) -> None:
        now = self._clock()
        last = self._last_instant
        self._last_instant = now
        if last is None:
            return
        elapsed = now - last
        cursor = self._cursor
        # Unused slots hold 0.0, so the subtraction is exact while warming up.
        self._total += elapsed - self._intervals[cursor]
        self._intervals[cursor] = elapsed
        self._cursor = (cursor + 1) % self._window_size
        if self._count < self._window_size:
            self._count += 1
        self._last_interval = elapsed

    def rate(self) -> float:
        if self._count == 0 or self._total <= 0.0:
            return 0.0
        return self._count / self._total

    def measure(self) -> float:
        return self._last_interval

    def cycles(self) -> int:
        return self._window_size

    @property
    def samples(self) -> int:
        """Number of intervals currently held, at most ``cycles()``."""

        return self._count

    def intervals(self) -> List[float]:
        """Return the stored intervals from oldest to newest."""

        start = (self._cursor - self._count) % self._window_size
        return [self._intervals[(start + i) % self._window_size] for i in range(self._count)]

    def set_cycles(self, window_size: int) -> None:
        validate_window_size(window_size)
        kept = self.intervals()[-window_size:]
        ring = kept + [0.0] * (window_size - len(kept))
        self._intervals = ring
        self._window_size = window_size
        self._count = len(kept)
        self._cursor = len(kept) % window_size
        self._total = math.fsum(kept)
        logger.debug("Resized rolling rate counter to %d cycles (%d samples kept)", window_size, len(kept))

    def __copy__(self) -> "RollingRateCounter":
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._intervals = list(self._intervals)
        return clone


__all__ = ["RollingRateCounter"]
