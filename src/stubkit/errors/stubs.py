"""Stub builder errors: raised while selecting, filling or invoking a constructor."""

from __future__ import annotations

from typing import Any, Sequence

from stubkit.errors.base import BaseError


class StubError(BaseError):
    """Raised when a stub cannot be built for a target type."""

    default_code = "stub_error"


class NoUsableConstructorError(StubError):
    """The target type has no constructor the builder can call."""

    default_code = "no_usable_constructor"

    def __init__(self, target: str, reason: str = "it has no public constructors", **kwargs: Any) -> None:
        super().__init__(
            f"Cannot construct type {target} because {reason}",
            detail={"target": target, "reason": reason},
            **kwargs,
        )
        self.target = target
        self.reason = reason


class DuplicateParameterTypeError(StubError):
    """A value of an already supplied runtime type was passed again."""

    default_code = "duplicate_parameter_type"

    def __init__(self, target: str, parameter_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"Already using a {parameter_type} to build {target}!",
            detail={"target": target, "parameter_type": parameter_type},
            **kwargs,
        )
        self.target = target
        self.parameter_type = parameter_type


class UnassignableParameterError(StubError):
    """The supplied value does not fit any parameter of the chosen constructor."""

    default_code = "unassignable_parameter"

    def __init__(
        self,
        target: str,
        parameter_type: str,
        valid_types: Sequence[str],
        **kwargs: Any,
    ) -> None:
        valid = ", ".join(valid_types) or "(none)"
        super().__init__(
            f"Cannot build {target} with {parameter_type} because it is not one of the "
            f"parameters for the chosen constructor. Valid parameters are: {valid}",
            detail={
                "target": target,
                "parameter_type": parameter_type,
                "valid_types": list(valid_types),
            },
            **kwargs,
        )
        self.target = target
        self.parameter_type = parameter_type
        self.valid_types = list(valid_types)


class UnmockableParameterError(StubError):
    """Some unfilled parameters are neither primitive, str, Protocol nor abstract."""

    default_code = "unmockable_parameter"

    def __init__(self, target: str, parameter_types: Sequence[str], **kwargs: Any) -> None:
        super().__init__(
            f"Cannot finish constructor for type {target} because the following remaining "
            f"parameters cannot be mocked: {', '.join(parameter_types)}",
            detail={"target": target, "parameter_types": list(parameter_types)},
            **kwargs,
        )
        self.target = target
        self.parameter_types = list(parameter_types)


class IncompleteConstructionError(StubError):
    """``finish()`` was called before every constructor parameter had a value."""

    default_code = "incomplete_construction"

    def __init__(self, target: str, required: int, filled: int, **kwargs: Any) -> None:
        super().__init__(
            f"Constructor parameters not filled for {target}! "
            f"Count of required parameters: {required}. "
            f"Count of filled parameters: {filled}. "
            "If you wish to fill unfilled parameters with default (empty) mocks, "
            "call fill_gaps_with_bare_mocks() before invoking finish().",
            detail={"target": target, "required": required, "filled": filled},
            **kwargs,
        )
        self.target = target
        self.required = required
        self.filled = filled


class SessionFinishedError(StubError):
    """The builder was used again after ``finish()``."""

    default_code = "session_finished"

    def __init__(self, target: str, operation: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot call {operation}() on a finished builder for {target}; "
            "start a new one with build()",
            detail={"target": target, "operation": operation},
            **kwargs,
        )
        self.target = target
        self.operation = operation


__all__ = [
    "DuplicateParameterTypeError",
    "IncompleteConstructionError",
    "NoUsableConstructorError",
    "SessionFinishedError",
    "StubError",
    "UnassignableParameterError",
    "UnmockableParameterError",
]
