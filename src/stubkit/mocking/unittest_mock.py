"""Mocking – creators backed by :mod:`unittest.mock`."""
from __future__ import annotations

from typing import Any, TypeVar, cast
from unittest.mock import MagicMock, create_autospec

T = TypeVar("T")


class AutospecMockCreator:
    """Create mocks with :func:`unittest.mock.create_autospec`.

    Methods on the mock enforce the signature of the real ones, and attributes
    missing from ``spec`` raise :class:`AttributeError`. This is the default
    creator.
    """

    def create(self, spec: type[T]) -> T:
        return cast(T, create_autospec(spec, instance=True))

    def __repr__(self) -> str:
        return "AutospecMockCreator()"


class MagicMockCreator:
    """Create permissive ``MagicMock(spec=...)`` mocks.

    Unlike :class:`AutospecMockCreator`, method calls are not signature
    checked, which suits targets whose dependencies use ``*args``-style
    interfaces.
    """

    def __init__(self, **mock_kwargs: Any) -> None:
        self._mock_kwargs = mock_kwargs

    def create(self, spec: type[T]) -> T:
        return cast(T, MagicMock(spec=spec, **self._mock_kwargs))

    def __repr__(self) -> str:
        return f"MagicMockCreator({self._mock_kwargs!r})"


__all__ = ["AutospecMockCreator", "MagicMockCreator"]
