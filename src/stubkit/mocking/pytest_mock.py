"""Mocking – creator backed by the pytest-mock ``mocker`` fixture.

Requires the ``pytest-mock`` package::

    pip install "stubkit[pytest]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, cast

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

T = TypeVar("T")


class PytestMockCreator:
    """Create autospecced mocks through a pytest-mock :class:`MockerFixture`.

    Mocks made this way are tracked by the fixture, so ``mocker.resetall()``
    and ``mocker.stopall()`` cover them too::

        def test_checkout(mocker):
            stubs = Stubs(mock_creator=PytestMockCreator(mocker))
            service = stubs.create_with_bare_mocks(CheckoutService)
    """

    def __init__(self, mocker: "MockerFixture") -> None:
        self._mocker = mocker

    def create(self, spec: type[T]) -> T:
        return cast(T, self._mocker.create_autospec(spec, instance=True))


__all__ = ["PytestMockCreator"]
