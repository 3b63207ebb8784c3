"""Testing fixtures – stubs, mocker_stubs."""
from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from stubkit.config import StubkitSettings
from stubkit.mocking import PytestMockCreator
from stubkit.stubs import Stubs


@pytest.fixture
def stubs(stubkit_settings: StubkitSettings) -> Stubs:
    """Pytest fixture: a :class:`Stubs` using the configured mock backend."""
    return Stubs.from_settings(stubkit_settings)


@pytest.fixture
def mocker_stubs(mocker: MockerFixture) -> Stubs:
    """Pytest fixture: a :class:`Stubs` whose mocks belong to pytest-mock's ``mocker``."""
    return Stubs(mock_creator=PytestMockCreator(mocker))


__all__ = ["mocker_stubs", "stubs"]
