"""Simulated frame loop that reports its frame rate periodically.

The loop sleeps to approximate ``target_hz`` and optionally stalls every
``stall_every`` frames so the difference between the rolling and the
fixed-cycle counters is visible in the logs.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from tickrate.clock import Clock, monotonic_clock
from tickrate.config import CounterConfig, build_counter
from tickrate.utils.logging import (
    JsonlRateSink,
    LoggingRateSink,
    RateReporter,
    RateSink,
)

logger = logging.getLogger(__name__)


@dataclass
class GameLoopConfig:
    """Configuration used by the simulated game loop."""

    counter: CounterConfig = field(default_factory=CounterConfig)
    target_hz: float = 60.0
    frames: int = 300
    stall_every: int = 0
    stall_s: float = 0.05
    report_every_s: float = 1.0
    metrics_jsonl: str | None = None
    name: str = "frame"


def _build_sinks(metrics_jsonl: str | None) -> List[RateSink]:
    sinks: List[RateSink] = [LoggingRateSink()]
    if metrics_jsonl:
        sinks.append(JsonlRateSink(Path(metrics_jsonl)))
    return sinks


def run_game_loop(cfg: GameLoopConfig | None = None, *, clock: Clock | None = None) -> float:
    """Run the loop and return the final measured rate."""

    cfg = cfg or GameLoopConfig()
    if cfg.target_hz <= 0:
        raise ValueError("target_hz must be positive")
    clock = clock or monotonic_clock
    counter = build_counter(cfg.counter, clock=clock)
    reporter = RateReporter(
        counter,
        name=cfg.name,
        sinks=_build_sinks(cfg.metrics_jsonl),
        interval_s=cfg.report_every_s,
        clock=clock,
    )
    frame_budget = 1.0 / cfg.target_hz

    try:
        for frame in range(cfg.frames):
            counter.update()
            reporter.maybe_report(frame)
            start = clock()
            if cfg.stall_every and frame and frame % cfg.stall_every == 0:
                time.sleep(cfg.stall_s)
            remaining = frame_budget - (clock() - start)
            if remaining > 0:
                time.sleep(remaining)
        reporter.report(cfg.frames)
    finally:
        reporter.close()

    logger.info("Finished %d frames at %s (target %.1f Hz)", cfg.frames, counter, cfg.target_hz)
    return counter.rate()


def main(cfg: GameLoopConfig | None = None) -> None:
    run_game_loop(cfg)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    main()
