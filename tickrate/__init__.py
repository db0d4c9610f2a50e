"""Rolling and fixed-cycle update rate counters."""

from .clock import Clock, ManualClock, monotonic_clock
from .config import CounterConfig, build_counter
from .counters import FixedCycleRateCounter, RollingRateCounter
from .format import describe_counter, format_rate
from .interfaces import InvalidWindowSize, RateCounter

__all__ = [
    "Clock",
    "CounterConfig",
    "FixedCycleRateCounter",
    "InvalidWindowSize",
    "ManualClock",
    "RateCounter",
    "RollingRateCounter",
    "build_counter",
    "describe_counter",
    "format_rate",
    "monotonic_clock",
]
