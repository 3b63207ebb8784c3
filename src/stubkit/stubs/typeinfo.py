"""Stubs – type introspection helpers.

Constructor parameters are matched to supplied values by *type*. These
helpers answer the questions the builder asks about a declared parameter
type: can a value of some runtime type be passed to it, and can stubkit make
a value of it on its own.
"""
from __future__ import annotations

import abc
import inspect
import types
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

PRIMITIVE_DEFAULTS: dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    bytes: b"",
}

_UNION_ORIGINS = (Union, types.UnionType)
_NO_HINT = object()
_PROTOCOL_EXCLUDED_ATTRS = frozenset({
    "__init__", "__init_subclass__", "__new__", "__subclasshook__", "__class_getitem__",
    "__annotate__", "__annotate_func__",
})

# match_rank results, closest first
EXACT = 0
NOMINAL = 1
STRUCTURAL = 2


def runtime_type(value: Any) -> type:
    """Return the type a value presents itself as.

    ``__class__`` rather than ``type()``: spec'd mocks report their spec class
    there, so a mock of ``Repo`` fills a ``Repo`` parameter.
    """
    return value.__class__


def type_name(tp: Any) -> str:
    """Qualified, human readable name of a type or annotation."""
    if isinstance(tp, type) and get_origin(tp) is None:
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp).replace("typing.", "")


def is_optional(tp: Any) -> bool:
    """True for ``X | None`` / ``Optional[X]``."""
    return get_origin(tp) in _UNION_ORIGINS and type(None) in get_args(tp)


def is_primitive(tp: Any) -> bool:
    return tp in PRIMITIVE_DEFAULTS


def is_interface(tp: Any) -> bool:
    """True for :class:`typing.Protocol` classes."""
    return isinstance(tp, type) and bool(getattr(tp, "_is_protocol", False))


def is_abstract(tp: Any) -> bool:
    """True for classes with abstract methods or that derive directly from ``ABC``."""
    return isinstance(tp, type) and (inspect.isabstract(tp) or abc.ABC in tp.__bases__)


def is_mockable(tp: Any) -> bool:
    """Whether the bare-value resolver can produce a value for *tp* on its own."""
    return tp is str or is_optional(tp) or is_primitive(tp) or is_interface(tp) or is_abstract(tp)


def is_assignable(target: Any, source: type) -> bool:
    """Whether a value whose runtime type is *source* may be passed as *target*."""
    return match_rank(target, source) is not None


def match_rank(target: Any, source: type) -> int | None:
    """How closely *source* fits *target*, or ``None`` when it does not fit.

    * :data:`EXACT`: *source* is the declared type (or a member of a declared union).
    * :data:`NOMINAL`: *source* derives from it (``bool`` for ``int``, a
      class for its ABC, a value for a ``NewType`` or bounded ``TypeVar``).
    * :data:`STRUCTURAL`: *source* only satisfies a Protocol structurally, or
      the target accepts anything (``Any``, ``object``, an unbound ``TypeVar``).

    Lower is closer. The stub builder uses the rank to give every supplied
    value its best slot.
    """
    return _rank(target, source, set())


def _rank(target: Any, source: type, seen: set[tuple[type, type]]) -> int | None:  # noqa: PLR0911
    if target is source:
        return EXACT
    if target is Any or target is object:
        return STRUCTURAL
    if target is None or target is type(None):
        return EXACT if source is type(None) else None

    origin = get_origin(target)
    if origin in _UNION_ORIGINS:
        ranks = [r for arg in get_args(target) if (r := _rank(arg, source, seen)) is not None]
        return min(ranks, default=None)
    if origin is not None:
        # list[int], Callable[..., T] and friends match on their origin
        return _rank(origin, source, seen)

    if isinstance(target, TypeVar):
        if target.__bound__ is None:
            return STRUCTURAL
        return _at_least(_rank(target.__bound__, source, seen), NOMINAL)
    supertype = getattr(target, "__supertype__", None)
    if supertype is not None:
        return _at_least(_rank(supertype, source, seen), NOMINAL)
    if not isinstance(target, type):
        return None

    if target in getattr(source, "__mro__", ()):
        return NOMINAL
    if is_interface(target):
        return STRUCTURAL if _conforms(source, target, seen) else None
    try:
        return NOMINAL if issubclass(source, target) else None
    except TypeError:
        return None


def _at_least(rank: int | None, floor: int) -> int | None:
    return None if rank is None else max(rank, floor)


def _protocol_members(proto: type) -> set[str]:
    members: set[str] = set()
    for base in proto.__mro__[:-1]:
        if base.__name__ in ("Protocol", "Generic"):
            continue
        members |= {n for n in getattr(base, "__annotations__", {}) if not n.startswith("_")}
        for name, value in base.__dict__.items():
            if name in _PROTOCOL_EXCLUDED_ATTRS:
                continue
            if not name.startswith("_"):
                members.add(name)
            elif name.startswith("__") and name.endswith("__") and inspect.isfunction(value):
                # dunder protocols such as __call__ or __len__
                members.add(name)
    return members


def _conforms(source: type, proto: type, seen: set[tuple[type, type]]) -> bool:
    """Structural check: *source* provides every member *proto* declares, and
    methods annotated on both sides return compatible types."""
    if (source, proto) in seen:
        # recursive protocol, e.g. a method returning the protocol itself
        return True
    seen = seen | {(source, proto)}
    annotations: set[str] = set()
    for base in getattr(source, "__mro__", ()):
        annotations |= set(getattr(base, "__annotations__", {}))

    for name in _protocol_members(proto):
        if not (hasattr(source, name) or name in annotations):
            return False
        expected = _return_hint(getattr(proto, name, None))
        actual = _return_hint(getattr(source, name, None))
        if expected is _NO_HINT or actual is _NO_HINT:
            continue
        if not _returns_compatible(expected, actual, seen):
            return False
    return True


def _return_hint(member: Any) -> Any:
    if not (inspect.isfunction(member) or inspect.ismethod(member)):
        return _NO_HINT
    try:
        hints = get_type_hints(member)
    except (NameError, TypeError):
        # annotations that cannot be evaluated are not compared
        return _NO_HINT
    return hints.get("return", _NO_HINT)


def _returns_compatible(expected: Any, actual: Any, seen: set[tuple[type, type]]) -> bool:
    origin = get_origin(actual)
    if origin in _UNION_ORIGINS:
        return all(_returns_compatible(expected, arg, seen) for arg in get_args(actual))
    if origin is not None:
        actual = origin
    if not isinstance(actual, type):
        # Self, TypeVars and the like
        return True
    return _rank(expected, actual, seen) is not None


__all__ = [
    "EXACT",
    "NOMINAL",
    "PRIMITIVE_DEFAULTS",
    "STRUCTURAL",
    "is_abstract",
    "is_assignable",
    "is_interface",
    "is_mockable",
    "is_optional",
    "is_primitive",
    "match_rank",
    "runtime_type",
    "type_name",
]
