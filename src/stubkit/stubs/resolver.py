"""Stubs – BareValueResolver."""
from __future__ import annotations

from typing import Any

from stubkit.mocking import AutospecMockCreator, MockCreator
from stubkit.observability.logging import get_logger
from stubkit.stubs.typeinfo import PRIMITIVE_DEFAULTS, is_optional, is_primitive

_log = get_logger(__name__)


class BareValueResolver:
    """Produce the emptiest acceptable value for a declared parameter type.

    * ``str`` → ``""``
    * ``X | None`` → ``None``
    * ``bool``/``int``/``float``/``complex``/``bytes`` → their zero value
    * anything else → a bare mock from the injected :class:`MockCreator`
    """

    def __init__(self, mock_creator: MockCreator | None = None) -> None:
        self._mock_creator: MockCreator = mock_creator or AutospecMockCreator()

    @property
    def mock_creator(self) -> MockCreator:
        return self._mock_creator

    def resolve(self, parameter_type: Any) -> Any:
        if parameter_type is str:
            return ""
        if is_optional(parameter_type):
            return None
        if is_primitive(parameter_type):
            return PRIMITIVE_DEFAULTS[parameter_type]
        mock = self._mock_creator.create(parameter_type)
        _log.debug(
            "stub.bare_mock_created",
            spec=parameter_type,
            creator=type(self._mock_creator).__name__,
        )
        return mock


__all__ = ["BareValueResolver"]
