from __future__ import annotations

import abc
import copy
from typing import TypeVar

from .format import format_rate

C = TypeVar("C", bound="RateCounter")


class InvalidWindowSize(ValueError):
    """Raised when a counter is configured with a non-positive window."""


def validate_window_size(window_size: int) -> int:
    if isinstance(window_size, bool) or not isinstance(window_size, int):
        raise InvalidWindowSize(f"Window size must be an integer, got {window_size!r}")
    if window_size <= 0:
        raise InvalidWindowSize(f"Window size must be positive, got {window_size}")
    return window_size


class RateCounter(abc.ABC):
    """Measures how often ``update`` is called.

    Call :meth:`update` once per cycle of the loop being measured, ideally at
    the very start of the cycle. The first call only establishes a baseline;
    rates become available once at least one interval has been observed.
    """

    @abc.abstractmethod
    def update(self) -> None:
        """Record one tick."""

    @abc.abstractmethod
    def rate(self) -> float:
        """Return the averaged rate in Hz, or ``0.0`` when there is no data yet."""

    @abc.abstractmethod
    def measure(self) -> float:
        """Return the most recent single interval in seconds, or ``0.0``."""

    @abc.abstractmethod
    def cycles(self) -> int:
        """Return the configured window size."""

    @abc.abstractmethod
    def set_cycles(self, window_size: int) -> None:
        """Change the window size. Not intended for the hot path."""

    def updated(self: C) -> C:
        """Return a copy with one more tick recorded, leaving ``self`` untouched."""

        clone = copy.copy(self)
        clone.update()
        return clone

    def __str__(self) -> str:
        return format_rate(self.rate())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cycles={self.cycles()}, rate={self.rate()})"


__all__ = ["InvalidWindowSize", "RateCounter", "validate_window_size"]
