"""Stubs – constructor descriptors, registry and selection."""
from __future__ import annotations

import dataclasses
import inspect
from typing import Any, Callable, Sequence, TypeVar

from stubkit.errors import NoUsableConstructorError
from stubkit.stubs.typeinfo import is_interface, type_name

T = TypeVar("T")

_EMPTY = inspect.Parameter.empty


@dataclasses.dataclass(frozen=True)
class ParameterSlot:
    """One declared constructor parameter, matched to values by ``annotation``."""

    name: str
    annotation: Any
    keyword_only: bool = False
    default: Any = _EMPTY

    @property
    def has_default(self) -> bool:
        return self.default is not _EMPTY

    def describe(self) -> str:
        return f"{self.name}: {type_name(self.annotation)}"


@dataclasses.dataclass(frozen=True)
class ConstructorDescriptor:
    """A callable that produces ``target`` plus its ordered parameter slots."""

    target: type
    factory: Callable[..., Any]
    parameters: tuple[ParameterSlot, ...] = ()

    @property
    def parameter_types(self) -> list[Any]:
        return [slot.annotation for slot in self.parameters]

    @classmethod
    def from_callable(cls, target: type, factory: Callable[..., Any]) -> ConstructorDescriptor:
        """Describe *factory* (a class or any callable returning *target*).

        String annotations are evaluated. Every parameter except ``*args`` and
        ``**kwargs`` becomes a slot and must carry a type annotation.
        """
        target_name = type_name(target)
        try:
            signature = inspect.signature(factory, eval_str=True)
        except (NameError, SyntaxError) as exc:
            raise NoUsableConstructorError(
                target_name, f"its constructor annotations cannot be resolved ({exc})", cause=exc
            ) from exc
        except ValueError as exc:
            raise NoUsableConstructorError(
                target_name, "no signature could be read for its constructor", cause=exc
            ) from exc

        slots: list[ParameterSlot] = []
        for param in signature.parameters.values():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            if param.annotation is _EMPTY:
                raise NoUsableConstructorError(
                    target_name, f"constructor parameter '{param.name}' has no type annotation"
                )
            slots.append(
                ParameterSlot(
                    name=param.name,
                    annotation=param.annotation,
                    keyword_only=param.kind is inspect.Parameter.KEYWORD_ONLY,
                    default=param.default,
                )
            )
        return cls(target=target, factory=factory, parameters=tuple(slots))

    @classmethod
    def from_init(cls, target: type) -> ConstructorDescriptor | None:
        """Describe the class's own constructor, or ``None`` if it cannot be called."""
        if unconstructible_reason(target) is not None:
            return None
        if target.__init__ is object.__init__ and target.__new__ is object.__new__:
            return cls(target=target, factory=target)
        return cls.from_callable(target, target)

    def invoke(self, ordered_args: Sequence[Any]) -> Any:
        """Call the factory with one value per slot, in slot order."""
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for slot, value in zip(self.parameters, ordered_args, strict=True):
            if slot.keyword_only:
                kwargs[slot.name] = value
            else:
                args.append(value)
        return self.factory(*args, **kwargs)

    def describe(self) -> str:
        name = getattr(self.factory, "__qualname__", repr(self.factory))
        params = ", ".join(slot.describe() for slot in self.parameters)
        return f"{name}({params})"


def unconstructible_reason(target: Any) -> str | None:
    """Why ``target(...)`` cannot be called, or ``None`` when it can."""
    if not isinstance(target, type):
        return "it is not a class"
    if is_interface(target):
        return "it is a Protocol"
    if inspect.isabstract(target):
        return "it is abstract"
    return None


class ConstructorRegistry:
    """Explicit constructors for target types.

    A class's own ``__init__`` is always a candidate; the registry adds
    alternatives such as classmethod factories. Registered factories are
    considered before ``__init__``, in registration order::

        registry = ConstructorRegistry()

        @registry.constructor_for(Connection)
        def _connection(settings: Settings, pool: Pool) -> Connection:
            return Connection.from_pool(settings, pool)
    """

    def __init__(self) -> None:
        self._factories: dict[type, list[Callable[..., Any]]] = {}

    def register(self, target: type[T], factory: Callable[..., T]) -> None:
        self._factories.setdefault(target, []).append(factory)

    def constructor_for(self, target: type[T]) -> Callable[[Callable[..., T]], Callable[..., T]]:
        """Decorator form of :meth:`register`."""

        def decorator(factory: Callable[..., T]) -> Callable[..., T]:
            self.register(target, factory)
            return factory

        return decorator

    def unregister(self, target: type) -> None:
        self._factories.pop(target, None)

    def clear(self) -> None:
        self._factories.clear()

    def factories(self, target: type) -> list[Callable[..., Any]]:
        return list(self._factories.get(target, []))

    def candidates(self, target: type) -> list[ConstructorDescriptor]:
        found = [ConstructorDescriptor.from_callable(target, f) for f in self._factories.get(target, [])]
        own = ConstructorDescriptor.from_init(target)
        if own is not None:
            found.append(own)
        return found

    def __contains__(self, target: object) -> bool:
        return target in self._factories


default_registry = ConstructorRegistry()


def register_constructor(target: type[T], factory: Callable[..., T] | None = None) -> Any:
    """Register *factory* for *target* on the default registry.

    Usable directly or as a decorator (``@register_constructor(Target)``).
    """
    if factory is None:
        return default_registry.constructor_for(target)
    default_registry.register(target, factory)
    return factory


def select_constructor(target: type, registry: ConstructorRegistry | None = None) -> ConstructorDescriptor:
    """Pick the constructor a stub builder will call.

    The first candidate that takes parameters wins; a parameterless candidate
    is used only when no candidate takes any.
    """
    candidates = (registry if registry is not None else default_registry).candidates(target)
    if not candidates:
        reason = unconstructible_reason(target) or "it has no public constructors"
        raise NoUsableConstructorError(type_name(target), reason)
    return next((c for c in candidates if c.parameters), candidates[0])


__all__ = [
    "ConstructorDescriptor",
    "ConstructorRegistry",
    "ParameterSlot",
    "default_registry",
    "register_constructor",
    "select_constructor",
    "unconstructible_reason",
]
