"""Utility helpers for tickrate."""

from .logging import JsonlRateSink, LoggingRateSink, RateEvent, RateReporter, RateSink

__all__ = [
    "JsonlRateSink",
    "LoggingRateSink",
    "RateEvent",
    "RateReporter",
    "RateSink",
]
