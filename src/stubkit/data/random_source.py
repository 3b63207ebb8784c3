"""Data – RandomSource, a seeded pseudo-random generator for test data."""
from __future__ import annotations

import random
from datetime import date, timedelta

from stubkit.data.clock import Clock, SystemClock

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

MIN_DATE = date(1995, 1, 1)
MAX_DATE = date.max

_SURROGATES = range(0xD800, 0xE000)


class RandomSource:
    """Wrap :class:`random.Random` with generators for common test values.

    Parameters
    ----------
    seed:
        Seed for the generator. When omitted a random seed is drawn and kept
        on :attr:`seed`, so a failing test can be replayed with
        ``RandomSource(seed=...)``.
    clock:
        Decides what "today" is for :meth:`random_past_date` and
        :meth:`random_future_date`. Defaults to the local system date.

    Example::

        source = RandomSource(seed=42)
        source.random_positive_number()
        source.random_past_date()
    """

    def __init__(self, seed: int | None = None, clock: Clock | None = None) -> None:
        self._seed = seed if seed is not None else random.SystemRandom().randrange(2**32)
        self._prng = random.Random(self._seed)  # noqa: S311
        self._clock: Clock = clock or SystemClock()

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def prng(self) -> random.Random:
        """The underlying generator."""
        return self._prng

    @property
    def clock(self) -> Clock:
        return self._clock

    def reseed(self, seed: int) -> None:
        self._seed = seed
        self._prng.seed(seed)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def random_number(self, min_value: int = INT_MIN, max_value: int = INT_MAX) -> int:
        """Random integer in ``[min_value, max_value)``; ``min_value`` for an empty range."""
        if max_value <= min_value:
            return min_value
        return self._prng.randrange(min_value, max_value)

    def random_positive_number(self) -> int:
        """Random integer between 1 and ``INT_MAX``."""
        return self.random_number(1)

    def coin_flip(self) -> bool:
        return self._prng.random() > 0.5

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------

    def random_date(self, min_date: date = MIN_DATE, max_date: date = MAX_DATE) -> date:
        """Random day in ``[min_date, max_date)``; ``min_date`` for an empty range."""
        days = (max_date - min_date).days
        if days <= 0:
            return min_date
        return min_date + timedelta(days=self._prng.randrange(days))

    def random_past_date(self) -> date:
        """Random day between 1995-01-01 and today; today itself when the clock is earlier."""
        today = self._clock.today()
        return self.random_date(min(MIN_DATE, today), today)

    def random_future_date(self) -> date:
        """Random day between today and the end of time."""
        return self.random_date(self._clock.today(), MAX_DATE)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def random_string(self, length: int = 4) -> str:
        """Random string of arbitrary Basic Multilingual Plane characters."""
        chars: list[str] = []
        while len(chars) < length:
            code_point = self._prng.randrange(0x10000)
            if code_point in _SURROGATES:
                continue
            chars.append(chr(code_point))
        return "".join(chars)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed})"


_default_source: RandomSource | None = None


def default_source() -> RandomSource:
    """Return the process-wide source used by the module-level helpers."""
    global _default_source
    if _default_source is None:
        _default_source = RandomSource()
    return _default_source


def set_default_source(source: RandomSource | None) -> None:
    """Replace the process-wide source (``None`` resets it to a fresh one on next use)."""
    global _default_source
    _default_source = source


__all__ = [
    "INT_MAX",
    "INT_MIN",
    "MAX_DATE",
    "MIN_DATE",
    "RandomSource",
    "default_source",
    "set_default_source",
]
