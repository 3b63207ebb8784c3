"""Unit tests for the MockCreator implementations and backend lookup."""
from __future__ import annotations

import abc
from unittest.mock import MagicMock, NonCallableMagicMock

import pytest

from stubkit.errors import InvalidSettingValueError
from stubkit.mocking import (
    DEFAULT_BACKEND,
    AutospecMockCreator,
    MagicMockCreator,
    MockCreator,
    PytestMockCreator,
    available_backends,
    mock_creator_for,
)
from stubkit.stubs import Stubs


class Mailer(abc.ABC):
    @abc.abstractmethod
    def send(self, to: str, body: str) -> bool: ...


class Signup:
    def __init__(self, mailer: Mailer, welcome_text: str) -> None:
        self.mailer = mailer
        self.welcome_text = welcome_text

    def register(self, email: str) -> bool:
        return self.mailer.send(email, self.welcome_text)


# ---------------------------------------------------------------------------
# unittest.mock creators
# ---------------------------------------------------------------------------


class TestAutospecMockCreator:
    def test_mock_passes_isinstance(self) -> None:
        mailer = AutospecMockCreator().create(Mailer)
        assert isinstance(mailer, Mailer)

    def test_unknown_attribute_raises(self) -> None:
        mailer = AutospecMockCreator().create(Mailer)
        with pytest.raises(AttributeError):
            mailer.fax  # noqa: B018

    def test_signature_is_enforced(self) -> None:
        mailer = AutospecMockCreator().create(Mailer)
        with pytest.raises(TypeError):
            mailer.send("only-one-argument")

    def test_fresh_mock_per_call(self) -> None:
        creator = AutospecMockCreator()
        assert creator.create(Mailer) is not creator.create(Mailer)


class TestMagicMockCreator:
    def test_mock_passes_isinstance(self) -> None:
        mailer = MagicMockCreator().create(Mailer)
        assert isinstance(mailer, Mailer)
        assert isinstance(mailer, MagicMock)

    def test_signature_not_enforced(self) -> None:
        mailer = MagicMockCreator().create(Mailer)
        mailer.send("a")
        mailer.send.assert_called_once_with("a")

    def test_mock_kwargs_forwarded(self) -> None:
        mailer = MagicMockCreator(name="mailer").create(Mailer)
        assert "mailer" in repr(mailer)


# ---------------------------------------------------------------------------
# Protocol and lookup
# ---------------------------------------------------------------------------


class TestMockCreatorLookup:
    def test_default_backend(self) -> None:
        assert DEFAULT_BACKEND == "autospec"
        assert isinstance(mock_creator_for(DEFAULT_BACKEND), AutospecMockCreator)

    def test_lookup_is_case_insensitive(self) -> None:
        assert isinstance(mock_creator_for("MagicMock"), MagicMockCreator)

    def test_available_backends(self) -> None:
        assert available_backends() == ["autospec", "magicmock"]

    def test_unknown_backend(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            mock_creator_for("mockito")
        assert exc_info.value.setting_name == "mock_backend"
        assert "autospec" in str(exc_info.value)

    @pytest.mark.parametrize("creator", [AutospecMockCreator(), MagicMockCreator()])
    def test_creators_satisfy_protocol(self, creator: object) -> None:
        assert isinstance(creator, MockCreator)


# ---------------------------------------------------------------------------
# pytest-mock
# ---------------------------------------------------------------------------


class TestPytestMockCreator:
    def test_creates_autospecced_mock(self, mocker) -> None:
        mailer = PytestMockCreator(mocker).create(Mailer)
        assert isinstance(mailer, Mailer)
        assert isinstance(mailer, NonCallableMagicMock)
        assert isinstance(PytestMockCreator(mocker), MockCreator)

    def test_behaviour_configured_after_construction(self, mocker) -> None:
        stubs = Stubs(mock_creator=PytestMockCreator(mocker))
        signup = stubs.build(Signup).with_("welcome!").fill_gaps_with_bare_mocks().finish()
        signup.mailer.send.return_value = True

        assert signup.register("a@example.com") is True
        signup.mailer.send.assert_called_once_with("a@example.com", "welcome!")
