"""Display helpers layered over :meth:`RateCounter.rate`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .interfaces import RateCounter


def format_rate(rate: float, *, precision: Optional[int] = None, unit: str = "Hz") -> str:
    """Render ``rate`` as ``"<rate> <unit>"``.

    Without ``precision`` the float is printed with Python's shortest repr,
    so ``format_rate(100.0)`` gives ``"100.0 Hz"``.
    """

    if precision is None:
        return f"{rate} {unit}"
    if precision < 0:
        raise ValueError("precision must be non-negative")
    return f"{rate:.{precision}f} {unit}"


def describe_counter(counter: "RateCounter") -> str:
    """Render ``"{ cycles: <window>, rate: <rate> }"`` for debug output.

    The window is labelled ``cycles`` after :meth:`RateCounter.cycles`, the
    accessor that returns it.
    """

    return f"{{ cycles: {counter.cycles()}, rate: {counter.rate()} }}"


__all__ = ["describe_counter", "format_rate"]
