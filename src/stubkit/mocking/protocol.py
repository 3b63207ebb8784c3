"""Mocking – MockCreator port."""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class MockCreator(Protocol):
    """Port: a layer between stubkit and a concrete mocking library.

    Implementations return a *bare* mock of ``spec``: an object that passes
    ``isinstance(mock, spec)`` and has no configured behaviour.
    """

    def create(self, spec: type[T]) -> T: ...


__all__ = ["MockCreator"]
