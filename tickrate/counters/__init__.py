"""Rate counter implementations."""

from .fixed import FixedCycleRateCounter
from .rolling import RollingRateCounter

__all__ = ["FixedCycleRateCounter", "RollingRateCounter"]
