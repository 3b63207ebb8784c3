"""Config settings – Settings base class and StubkitSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from stubkit.errors import InvalidSettingValueError
from stubkit.mocking import DEFAULT_BACKEND, available_backends

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class StubkitSettings(Settings):
    """Settings read from ``STUBKIT_*`` environment variables.

    * ``STUBKIT_MOCK_BACKEND``: mock creator used by the ``stubs`` fixture
      (``autospec`` or ``magicmock``).
    * ``STUBKIT_SEED``: seed for the ``random_source`` fixture.
    * ``STUBKIT_LOG_LEVEL`` / ``STUBKIT_LOG_JSON``: logging setup.
    """

    _prefix: ClassVar[str] = "STUBKIT"

    mock_backend: str = DEFAULT_BACKEND
    seed: int | None = None
    log_level: str = "WARNING"
    log_json: bool = False

    def _validate(self) -> None:
        if self.mock_backend.lower() not in available_backends():
            raise InvalidSettingValueError(
                "mock_backend",
                self.mock_backend,
                f"expected one of {', '.join(available_backends())}",
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["Settings", "StubkitSettings"]
