"""Data – Clock protocol + implementations used to decide what "today" is."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: source of the current date for date generators."""

    def today(self) -> date: ...


class SystemClock:
    """Local wall-clock date, like :meth:`datetime.date.today`."""

    def today(self) -> date:
        return date.today()


class FrozenClock:
    """Test clock pinned to a fixed day."""

    def __init__(self, fixed: date | datetime) -> None:
        self._fixed = fixed.date() if isinstance(fixed, datetime) else fixed

    def today(self) -> date:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen day by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
