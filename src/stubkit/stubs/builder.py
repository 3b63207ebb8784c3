"""Stubs – StubBuilder[T], a fluent builder that fills constructor parameters."""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from stubkit.errors import (
    DuplicateParameterTypeError,
    IncompleteConstructionError,
    SessionFinishedError,
    UnmockableParameterError,
)
from stubkit.mocking import MockCreator
from stubkit.observability.logging import get_logger
from stubkit.stubs.constructor import (
    ConstructorDescriptor,
    ConstructorRegistry,
    ParameterSlot,
    select_constructor,
)
from stubkit.stubs.ordering import ConstructorParametersComparer
from stubkit.stubs.resolver import BareValueResolver
from stubkit.stubs.typeinfo import is_assignable, is_mockable, runtime_type, type_name

T = TypeVar("T")

_log = get_logger(__name__)


class StubBuilder(Generic[T]):
    """Build one instance of ``target`` with stubbed dependencies.

    Values are matched to constructor parameters by type, so they may be
    supplied in any order::

        service = (
            StubBuilder(CheckoutService)
            .with_(FakePaymentGateway())
            .fill_gaps_with_bare_mocks()
            .finish()
        )

    A builder is single-use: once :meth:`finish` has run, every further call
    raises :class:`SessionFinishedError`.
    """

    def __init__(
        self,
        target: type[T],
        *,
        mock_creator: MockCreator | None = None,
        registry: ConstructorRegistry | None = None,
    ) -> None:
        self._target = target
        self._target_name = type_name(target)
        self._resolver = BareValueResolver(mock_creator)
        self._constructor: ConstructorDescriptor = select_constructor(target, registry)
        self._constructor_parameter_types: list[Any] = self._constructor.parameter_types
        self._comparer = ConstructorParametersComparer(self._constructor_parameter_types, self._target_name)
        self._constructor_parameters: list[Any] = []
        self._claimed_slots: list[int] = []
        self._gap_values: dict[int, Any] = {}
        self._filled_param_types: set[type] = set()
        self._finished = False
        _log.debug(
            "stub.constructor_selected",
            target=self._target_name,
            constructor=self._constructor.describe(),
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def target(self) -> type[T]:
        return self._target

    @property
    def constructor(self) -> ConstructorDescriptor:
        return self._constructor

    @property
    def supplied(self) -> tuple[Any, ...]:
        """Values supplied so far in supply order, followed by gap fillers."""
        return (*self._constructor_parameters, *self._gap_values.values())

    @property
    def finished(self) -> bool:
        return self._finished

    def remaining_parameters(self) -> list[ParameterSlot]:
        """Declared parameters no supplied value has claimed yet."""
        return [self._constructor.parameters[index] for index in self._open_slots()]

    # ------------------------------------------------------------------
    # Fluent API
    # ------------------------------------------------------------------

    def with_(self, parameter: Any) -> StubBuilder[T]:
        """Use *parameter* as a constructor argument.

        Every supplied value claims its own parameter; earlier values may
        move to another slot they fit to make room.
        """
        self._ensure_open("with_")
        param_type = runtime_type(parameter)
        if param_type in self._filled_param_types:
            # TODO: allow constructors that take two dependencies of the same type
            raise DuplicateParameterTypeError(self._target_name, type_name(param_type))

        candidates = [*self._constructor_parameters, parameter]
        self._claimed_slots = self._comparer.assign(candidates, self._supplied_slots())
        self._constructor_parameters.append(parameter)
        self._filled_param_types.add(param_type)
        _log.debug("stub.parameter_supplied", target=self._target_name, parameter_type=param_type)
        return self

    def with_these(self, *parameters: Any) -> StubBuilder[T]:
        """Chain :meth:`with_` over *parameters*, left to right."""
        for parameter in parameters:
            self.with_(parameter)
        return self

    def fill_gaps_with_bare_mocks(self) -> StubBuilder[T]:
        """Fill every unassigned parameter with a default value or bare mock."""
        self._ensure_open("fill_gaps_with_bare_mocks")
        remaining = self._open_slots()
        slots = self._constructor.parameters
        unmockable = [
            slots[index] for index in remaining
            if not self._has_usable_default(slots[index]) and not is_mockable(slots[index].annotation)
        ]
        if unmockable:
            raise UnmockableParameterError(
                self._target_name, [type_name(slot.annotation) for slot in unmockable]
            )

        for index in remaining:
            slot = slots[index]
            if self._has_usable_default(slot):
                value = slot.default
            else:
                value = self._resolver.resolve(slot.annotation)
            self._gap_values[index] = value
            self._filled_param_types.add(runtime_type(value))
            _log.debug("stub.gap_filled", target=self._target_name, parameter=slot.name)
        return self

    # ------------------------------------------------------------------
    # Terminal
    # ------------------------------------------------------------------

    def finish(self) -> T:
        """Construct the target from the supplied values."""
        self._ensure_open("finish")
        required = len(self._constructor_parameter_types)
        filled = len(self._constructor_parameters) + len(self._gap_values)
        if required != filled:
            raise IncompleteConstructionError(self._target_name, required=required, filled=filled)

        # values may have been supplied in any order
        ordered: list[Any] = [None] * required
        slots = self._comparer.assign(self._constructor_parameters, self._supplied_slots())
        for slot, value in zip(slots, self._constructor_parameters):
            ordered[slot] = value
        for slot, value in self._gap_values.items():
            ordered[slot] = value
        self._finished = True
        instance = self._constructor.invoke(ordered)
        _log.debug("stub.finished", target=self._target_name, parameters=filled)
        return instance

    # Alias: ``StubBuilder(Target).with_(x)()`` reads as a build call
    def __call__(self) -> T:
        return self.finish()

    def __repr__(self) -> str:
        return (
            f"StubBuilder({self._target_name}, supplied={len(self.supplied)}"
            f"/{len(self._constructor_parameter_types)})"
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_open(self, operation: str) -> None:
        if self._finished:
            raise SessionFinishedError(self._target_name, operation)

    def _supplied_slots(self) -> list[int]:
        """Slots open to values passed through :meth:`with_`."""
        return [i for i in range(len(self._constructor_parameter_types)) if i not in self._gap_values]

    def _open_slots(self) -> list[int]:
        return [i for i in self._supplied_slots() if i not in self._claimed_slots]

    @staticmethod
    def _has_usable_default(slot: ParameterSlot) -> bool:
        return slot.has_default and is_assignable(slot.annotation, runtime_type(slot.default))


__all__ = ["StubBuilder"]
