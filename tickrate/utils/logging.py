"""Rate reporting for a loop instrumented with a rate counter.

Everything here runs on the thread that drives the counter; reporting is
throttled so the per-iteration cost stays at one clock read.
"""

from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import IO, Any, Mapping, Optional, Sequence

from tickrate.clock import Clock, monotonic_clock
from tickrate.format import format_rate
from tickrate.interfaces import RateCounter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RateEvent:
    """Snapshot of a counter at one point in time.

    Attributes:
        timestamp: Seconds since the UNIX epoch.
        name: Label of the measured loop (for example ``"render"``).
        rate: Averaged rate in Hz as reported by the counter.
        interval: Most recent single interval in seconds.
        cycles: Window size of the counter at the time of the snapshot.
        pending: Ticks the rate does not yet reflect. Always ``0`` for a
            rolling counter; ticks into the current cycle for a fixed one.
        step: Optional loop iteration associated with the snapshot.
        extra: Arbitrary metadata that should be preserved in structured logs.
    """

    timestamp: float
    name: str
    rate: float
    interval: float
    cycles: int
    pending: int = 0
    step: Optional[int] = None
    extra: Mapping[str, Any] | None = None

    @classmethod
    def capture(
        cls,
        counter: RateCounter,
        *,
        name: str,
        step: Optional[int] = None,
        extra: Mapping[str, Any] | None = None,
    ) -> "RateEvent":
        rate_age_cycles = getattr(counter, "rate_age_cycles", None)
        return cls(
            timestamp=time.time(),
            name=name,
            rate=counter.rate(),
            interval=counter.measure(),
            cycles=counter.cycles(),
            pending=rate_age_cycles() if rate_age_cycles is not None else 0,
            step=step,
            extra=dict(extra) if extra else None,
        )

    @property
    def display(self) -> str:
        return format_rate(self.rate)


class RateSink:
    """Abstract interface implemented by rate event consumers."""

    def write(self, event: RateEvent) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def close(self) -> None:  # pragma: no cover - interface
        raise NotImplementedError


class JsonlRateSink(RateSink):
    """Appends one JSON object per event to ``path``.

    The file is opened on the first write, so a reporter that never fires
    leaves no empty file behind. Lines are flushed every ``flush_every``
    events and on :meth:`close`.
    """

    def __init__(self, path: os.PathLike[str] | str, *, flush_every: int = 1) -> None:
        if flush_every <= 0:
            raise ValueError("flush_every must be positive")
        self.path = Path(path)
        self._flush_every = flush_every
        self._pending = 0
        self._file: IO[str] | None = None

    def write(self, event: RateEvent) -> None:
        if self._file is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self.path.open("a", encoding="utf-8")
        record = asdict(event)
        record["display"] = event.display
        self._file.write(json.dumps(record, sort_keys=True) + "\n")
        self._pending += 1
        if self._pending >= self._flush_every:
            self._file.flush()
            self._pending = 0

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class LoggingRateSink(RateSink):
    """Writes one human readable log record per event."""

    def __init__(
        self,
        *,
        target: logging.Logger | None = None,
        level: int = logging.INFO,
        precision: int = 2,
    ) -> None:
        self._logger = target or logger
        self._level = level
        self._precision = precision

    def write(self, event: RateEvent) -> None:
        self._logger.log(
            self._level,
            "%s rate=%s interval=%.2fms cycles=%d step=%s",
            event.name,
            format_rate(event.rate, precision=self._precision),
            event.interval * 1000.0,
            event.cycles,
            event.step,
        )

    def close(self) -> None:
        return None


class RateReporter:
    """Emits counter snapshots to sinks at most once per ``interval_s``.

    Meant to be called from the same loop that drives the counter, right
    after ``counter.update()``. Reporting is throttled by its own clock so
    the cost per loop iteration is a single clock read.
    """

    def __init__(
        self,
        counter: RateCounter,
        *,
        name: str = "loop",
        sinks: Sequence[RateSink] | None = None,
        interval_s: float = 1.0,
        clock: Optional[Clock] = None,
    ) -> None:
        if interval_s < 0:
            raise ValueError("interval_s must be non-negative")
        self._counter = counter
        self._name = name
        self._sinks = list(sinks) if sinks is not None else [LoggingRateSink()]
        self._interval_s = interval_s
        self._clock = clock or monotonic_clock
        self._last_report: Optional[float] = None
        self.reports = 0

    def maybe_report(
        self,
        step: Optional[int] = None,
        *,
        extra: Mapping[str, Any] | None = None,
    ) -> Optional[RateEvent]:
        now = self._clock()
        if self._last_report is None:
            self._last_report = now
            return None
        if now - self._last_report < self._interval_s:
            return None
        self._last_report = now
        return self.report(step, extra=extra)

    def report(
        self,
        step: Optional[int] = None,
        *,
        extra: Mapping[str, Any] | None = None,
    ) -> RateEvent:
        event = RateEvent.capture(self._counter, name=self._name, step=step, extra=extra)
        for sink in self._sinks:
            sink.write(event)
        self.reports += 1
        return event

    def close(self) -> None:
        for sink in self._sinks:
            sink.close()


__all__ = [
    "JsonlRateSink",
    "LoggingRateSink",
    "RateEvent",
    "RateReporter",
    "RateSink",
]
