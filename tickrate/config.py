from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .clock import Clock
from .counters import FixedCycleRateCounter, RollingRateCounter
from .interfaces import RateCounter, validate_window_size

STRATEGIES = {
    "rolling": RollingRateCounter,
    "fixed": FixedCycleRateCounter,
}


@dataclass
class CounterConfig:
    """Selects a counter strategy and its window size."""

    strategy: str = "rolling"
    window_size: int = 30

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unsupported counter strategy: {self.strategy!r} "
                f"(expected one of {sorted(STRATEGIES)})"
            )
        validate_window_size(self.window_size)


def build_counter(cfg: CounterConfig, *, clock: Optional[Clock] = None) -> RateCounter:
    counter_cls = STRATEGIES[cfg.strategy]
    return counter_cls(cfg.window_size, clock=clock)


__all__ = ["CounterConfig", "STRATEGIES", "build_counter"]
