"""Testing fixtures – random_source, frozen_clock."""
from __future__ import annotations

from datetime import date

import pytest

from stubkit.config import StubkitSettings
from stubkit.data import FrozenClock, RandomSource


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """Pytest fixture: a clock pinned to 2026-01-01."""
    return FrozenClock(date(2026, 1, 1))


@pytest.fixture
def random_source(stubkit_settings: StubkitSettings) -> RandomSource:
    """Pytest fixture: a :class:`RandomSource` seeded from ``STUBKIT_SEED`` when set."""
    return RandomSource(seed=stubkit_settings.seed)


__all__ = ["frozen_clock", "random_source"]
