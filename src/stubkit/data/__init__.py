"""Data – random test data generators.

The module-level helpers draw from one process-wide :class:`RandomSource`;
pass your own ``RandomSource(seed=...)`` around when a test must be
reproducible.
"""
from __future__ import annotations

from datetime import date

from stubkit.data.clock import Clock, FrozenClock, SystemClock
from stubkit.data.filler import RandomDataBuilder, build_random
from stubkit.data.random_source import (
    INT_MAX,
    INT_MIN,
    MAX_DATE,
    MIN_DATE,
    RandomSource,
    default_source,
    set_default_source,
)
from stubkit.data.text import flip_case, random_case


def random_number(min_value: int = INT_MIN, max_value: int = INT_MAX) -> int:
    """Random integer in ``[min_value, max_value)``."""
    return default_source().random_number(min_value, max_value)


def random_positive_number() -> int:
    """Random integer between 1 and ``INT_MAX``."""
    return default_source().random_positive_number()


def random_date(min_date: date = MIN_DATE, max_date: date = MAX_DATE) -> date:
    """Random day in ``[min_date, max_date)``."""
    return default_source().random_date(min_date, max_date)


def random_past_date() -> date:
    return default_source().random_past_date()


def random_future_date() -> date:
    return default_source().random_future_date()


def random_string(length: int = 4) -> str:
    """Random unicode string."""
    return default_source().random_string(length)


__all__ = [
    "INT_MAX",
    "INT_MIN",
    "MAX_DATE",
    "MIN_DATE",
    "Clock",
    "FrozenClock",
    "RandomDataBuilder",
    "RandomSource",
    "SystemClock",
    "build_random",
    "default_source",
    "flip_case",
    "random_case",
    "random_date",
    "random_future_date",
    "random_number",
    "random_past_date",
    "random_positive_number",
    "random_string",
    "set_default_source",
]
