"""Testing fixtures – stubkit_settings."""
from __future__ import annotations

import pytest

from stubkit.config import StubkitSettings, load_settings
from stubkit.observability.logging import LoggerFactory


@pytest.fixture(scope="session")
def stubkit_settings() -> StubkitSettings:
    """Session fixture: settings from ``STUBKIT_*`` variables, logging configured."""
    settings = load_settings()
    LoggerFactory.configure(settings.log_level_number, json=settings.log_json, replace_handlers=False)
    return settings


__all__ = ["stubkit_settings"]
