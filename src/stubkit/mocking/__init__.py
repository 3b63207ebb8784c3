"""Mocking – a thin layer over mocking libraries.

stubkit never builds mocks itself; every bare mock comes from a
:class:`MockCreator` handed to the builder.
"""
from stubkit.mocking.protocol import MockCreator
from stubkit.mocking.pytest_mock import PytestMockCreator
from stubkit.mocking.registry import DEFAULT_BACKEND, available_backends, mock_creator_for
from stubkit.mocking.unittest_mock import AutospecMockCreator, MagicMockCreator

__all__ = [
    "DEFAULT_BACKEND",
    "AutospecMockCreator",
    "MagicMockCreator",
    "MockCreator",
    "PytestMockCreator",
    "available_backends",
    "mock_creator_for",
]
