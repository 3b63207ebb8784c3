"""Unit tests for BareValueResolver and the bare_mock helper."""
from __future__ import annotations

from typing import Any, Protocol
from unittest.mock import MagicMock

import pytest

from stubkit import bare_mock
from stubkit.mocking import MagicMockCreator
from stubkit.stubs import BareValueResolver


class Cache(Protocol):
    def get(self, key: str) -> bytes | None: ...


class TestPrimitiveDefaults:
    @pytest.mark.parametrize(
        ("parameter_type", "expected"),
        [(bool, False), (int, 0), (float, 0.0), (complex, 0j), (bytes, b""), (str, "")],
    )
    def test_zero_values(self, parameter_type: type, expected: Any) -> None:
        value = BareValueResolver().resolve(parameter_type)
        assert value == expected
        assert type(value) is parameter_type

    def test_optional_resolves_to_none(self) -> None:
        assert BareValueResolver().resolve(Cache | None) is None

    def test_primitives_never_reach_the_creator(self) -> None:
        creator = MagicMock()
        BareValueResolver(creator).resolve(int)
        BareValueResolver(creator).resolve(str)
        creator.create.assert_not_called()


class TestMockDelegation:
    def test_other_types_delegate_to_creator(self) -> None:
        creator = MagicMock()
        result = BareValueResolver(creator).resolve(Cache)
        creator.create.assert_called_once_with(Cache)
        assert result is creator.create.return_value

    def test_default_creator_is_autospec(self) -> None:
        mock = BareValueResolver().resolve(Cache)
        with pytest.raises(TypeError):
            mock.get()  # missing "key" argument

    def test_mock_creator_property(self) -> None:
        creator = MagicMockCreator()
        assert BareValueResolver(creator).mock_creator is creator


class TestBareMockHelper:
    def test_string_is_empty(self) -> None:
        assert bare_mock(str) == ""

    def test_protocol_mock(self) -> None:
        mock = bare_mock(Cache)
        assert mock.__class__ is Cache

    def test_explicit_creator(self) -> None:
        mock = bare_mock(Cache, mock_creator=MagicMockCreator())
        mock.get()  # no signature checking
        mock.get.assert_called_once_with()
