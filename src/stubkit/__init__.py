"""
stubkit – unit-testing helpers: stub builders, bare mocks and random test data.

Import path convention::

    from stubkit import build, create_with_bare_mocks, bare_mock
    from stubkit.data import random_past_date, random_case
    from stubkit.mocking import MagicMockCreator
"""

from stubkit.data import RandomDataBuilder, RandomSource, build_random, random_case
from stubkit.errors import (
    DuplicateParameterTypeError,
    IncompleteConstructionError,
    NoUsableConstructorError,
    SessionFinishedError,
    StubError,
    UnassignableParameterError,
    UnmockableParameterError,
)
from stubkit.stubs import (
    ConstructorParametersComparer,
    StubBuilder,
    Stubs,
    bare_mock,
    build,
    create_with_bare_mocks,
    register_constructor,
)

__version__ = "0.1.0"
__all__ = [
    "ConstructorParametersComparer",
    "DuplicateParameterTypeError",
    "IncompleteConstructionError",
    "NoUsableConstructorError",
    "RandomDataBuilder",
    "RandomSource",
    "SessionFinishedError",
    "StubBuilder",
    "StubError",
    "Stubs",
    "UnassignableParameterError",
    "UnmockableParameterError",
    "__version__",
    "bare_mock",
    "build",
    "build_random",
    "create_with_bare_mocks",
    "random_case",
    "register_constructor",
]
