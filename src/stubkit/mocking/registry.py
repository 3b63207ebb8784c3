"""Mocking – lookup of mock creators by backend name."""
from __future__ import annotations

from typing import Callable

from stubkit.errors import InvalidSettingValueError
from stubkit.mocking.protocol import MockCreator
from stubkit.mocking.unittest_mock import AutospecMockCreator, MagicMockCreator

_BACKENDS: dict[str, Callable[[], MockCreator]] = {
    "autospec": AutospecMockCreator,
    "magicmock": MagicMockCreator,
}

DEFAULT_BACKEND = "autospec"


def available_backends() -> list[str]:
    """Return the names accepted by :func:`mock_creator_for`."""
    return sorted(_BACKENDS)


def mock_creator_for(name: str) -> MockCreator:
    """Return a fresh creator for the backend called *name*.

    The pytest-mock backend needs a live ``mocker`` fixture and is therefore
    constructed directly (``PytestMockCreator(mocker)``) rather than by name.
    """
    try:
        factory = _BACKENDS[name.lower()]
    except KeyError:
        raise InvalidSettingValueError(
            "mock_backend", name, f"expected one of {', '.join(available_backends())}"
        ) from None
    return factory()


__all__ = ["DEFAULT_BACKEND", "available_backends", "mock_creator_for"]
