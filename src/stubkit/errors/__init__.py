"""Error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── StubError                        (stubs.py)
    │   ├── NoUsableConstructorError
    │   ├── DuplicateParameterTypeError
    │   ├── UnassignableParameterError
    │   ├── UnmockableParameterError
    │   ├── IncompleteConstructionError
    │   └── SessionFinishedError
    └── ConfigError                      (config.py)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from stubkit.errors.base import BaseError
from stubkit.errors.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from stubkit.errors.stubs import (
    DuplicateParameterTypeError,
    IncompleteConstructionError,
    NoUsableConstructorError,
    SessionFinishedError,
    StubError,
    UnassignableParameterError,
    UnmockableParameterError,
)

__all__ = [
    "BaseError",
    "ConfigError",
    "DuplicateParameterTypeError",
    "IncompleteConstructionError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "NoUsableConstructorError",
    "SessionFinishedError",
    "StubError",
    "UnassignableParameterError",
    "UnmockableParameterError",
]
