"""Time sources used by the rate counters.

A clock is any zero-argument callable returning seconds as a float. Readings
must never go backwards for a given counter; that is the caller's
responsibility and is not checked on the hot path.
"""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]

monotonic_clock: Clock = time.perf_counter


class ManualClock:
    """Deterministic clock advanced by hand, for tests and simulations."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def __call__(self) -> float:
        return self._now

    @property
    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now += seconds
        return self._now

    def set(self, now: float) -> None:
        # Allows deliberately non-monotonic readings.
        self._now = float(now)


__all__ = ["Clock", "ManualClock", "monotonic_clock"]
