"""Stubs – entry points for building stubs with an injected mock creator."""
from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from stubkit.mocking import AutospecMockCreator, MockCreator, mock_creator_for
from stubkit.stubs.builder import StubBuilder
from stubkit.stubs.constructor import ConstructorRegistry
from stubkit.stubs.resolver import BareValueResolver

if TYPE_CHECKING:
    from stubkit.config import StubkitSettings

T = TypeVar("T")


class Stubs:
    """Easily created stub implementations, bound to one mocking backend.

    Every builder made by this object uses the same :class:`MockCreator`;
    build a second ``Stubs`` to use a different backend side by side::

        stubs = Stubs(mock_creator=MagicMockCreator())
        service = stubs.create_with_bare_mocks(CheckoutService)
        gateway = stubs.bare_mock(PaymentGateway)
    """

    def __init__(
        self,
        mock_creator: MockCreator | None = None,
        registry: ConstructorRegistry | None = None,
    ) -> None:
        self._mock_creator: MockCreator = mock_creator or AutospecMockCreator()
        self._registry = registry

    @classmethod
    def from_settings(cls, settings: "StubkitSettings", registry: ConstructorRegistry | None = None) -> Stubs:
        return cls(mock_creator=mock_creator_for(settings.mock_backend), registry=registry)

    @property
    def mock_creator(self) -> MockCreator:
        return self._mock_creator

    def bare_mock(self, spec: type[T]) -> T:
        """Return an empty implementation of *spec* with no behaviour (``""`` for ``str``)."""
        return BareValueResolver(self._mock_creator).resolve(spec)

    def build(self, target: type[T]) -> StubBuilder[T]:
        """Start building a stub of *target*."""
        return StubBuilder(target, mock_creator=self._mock_creator, registry=self._registry)

    def create_with_bare_mocks(self, target: type[T]) -> T:
        """Create *target* with every dependency barely mocked."""
        return self.build(target).fill_gaps_with_bare_mocks().finish()

    def __repr__(self) -> str:
        return f"Stubs(mock_creator={self._mock_creator!r})"


def bare_mock(spec: type[T], *, mock_creator: MockCreator | None = None) -> T:
    """Return an empty implementation of *spec* with no behaviour."""
    return Stubs(mock_creator).bare_mock(spec)


def build(target: type[T], *, mock_creator: MockCreator | None = None) -> StubBuilder[T]:
    """Start building a stub of *target* (``finish()`` completes it)."""
    return Stubs(mock_creator).build(target)


def create_with_bare_mocks(target: type[T], *, mock_creator: MockCreator | None = None) -> T:
    """Shorthand for ``build(target).fill_gaps_with_bare_mocks().finish()``."""
    return Stubs(mock_creator).create_with_bare_mocks(target)


__all__ = ["Stubs", "bare_mock", "build", "create_with_bare_mocks"]
