"""Data – RandomDataBuilder[T], objects whose fields are filled with Faker data."""
from __future__ import annotations

import enum
import inspect
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Callable, Generic, TypeVar, get_args, get_origin

from faker import Faker

from stubkit.data.random_source import RandomSource, default_source
from stubkit.errors import NoUsableConstructorError
from stubkit.stubs.constructor import ConstructorDescriptor, ParameterSlot
from stubkit.stubs.typeinfo import is_optional, type_name

T = TypeVar("T")

# Parameter-name fragments mapped to Faker providers; checked in order.
_NAME_HINTS: tuple[tuple[str, str], ...] = (
    ("email", "email"),
    ("first_name", "first_name"),
    ("last_name", "last_name"),
    ("username", "user_name"),
    ("user_name", "user_name"),
    ("company", "company"),
    ("name", "name"),
    ("phone", "phone_number"),
    ("street", "street_address"),
    ("address", "address"),
    ("city", "city"),
    ("country", "country"),
    ("zip", "postcode"),
    ("postcode", "postcode"),
    ("url", "url"),
    ("title", "sentence"),
    ("description", "paragraph"),
)

_CONTAINER_FACTORIES: dict[Any, Callable[[], Any]] = {
    list: list,
    set: set,
    frozenset: frozenset,
    dict: dict,
    tuple: tuple,
}


class RandomDataBuilder(Generic[T]):
    """A ``T`` constructed with random values for every constructor parameter.

    Values are chosen by parameter name first (``email`` gets an email
    address, ``city`` a city) and by annotation otherwise. Nested classes are
    filled recursively up to ``max_depth``; anything unsupported receives
    its default or ``None``::

        customer = (
            RandomDataBuilder(Customer)
            .with_(lambda c: setattr(c, "active", False))
            .finish()
        )
    """

    def __init__(self, target: type[T], *, source: RandomSource | None = None, max_depth: int = 3) -> None:
        self._target = target
        self._source = source or default_source()
        self._faker = Faker()
        self._faker.seed_instance(self._source.random_number(0))
        self._max_depth = max_depth
        self._result: T = self._construct(target, depth=0)

    @property
    def faker(self) -> Faker:
        return self._faker

    def with_(self, action: Callable[[T], Any]) -> RandomDataBuilder[T]:
        """Run *action* against the underlying object."""
        action(self._result)
        return self

    def finish(self) -> T:
        """Return the underlying object."""
        return self._result

    def __call__(self) -> T:
        return self.finish()

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def _construct(self, target: type[Any], depth: int) -> Any:
        descriptor = ConstructorDescriptor.from_init(target)
        if descriptor is None:
            raise NoUsableConstructorError(type_name(target), "it cannot be instantiated with random data")
        args = [self._value_for(slot, depth) for slot in descriptor.parameters]
        return descriptor.invoke(args)

    def _value_for(self, slot: ParameterSlot, depth: int) -> Any:
        annotation = slot.annotation
        if is_optional(annotation):
            annotation = next(a for a in get_args(annotation) if a is not type(None))

        if annotation is str:
            hinted = self._value_from_name(slot.name)
            if hinted is not None:
                return hinted
        value = self._value_for_type(annotation, depth)
        if value is None and slot.has_default:
            return slot.default
        return value

    def _value_from_name(self, name: str) -> str | None:
        lowered = name.lower()
        for fragment, provider in _NAME_HINTS:
            if fragment in lowered:
                return str(getattr(self._faker, provider)())
        return None

    def _value_for_type(self, annotation: Any, depth: int) -> Any:  # noqa: PLR0911
        fake = self._faker
        if annotation is str:
            return fake.pystr(min_chars=1, max_chars=20)
        if annotation is bool:
            return fake.pybool()
        if annotation is int:
            return fake.pyint()
        if annotation is float:
            return fake.pyfloat()
        if annotation is Decimal:
            return fake.pydecimal(left_digits=6, right_digits=2)
        if annotation is datetime:
            return fake.date_time()
        if annotation is date:
            return fake.date_object()
        if annotation is time:
            return fake.time_object()
        if annotation is uuid.UUID:
            return uuid.UUID(fake.uuid4())
        if annotation is bytes:
            return fake.binary(length=8)
        if inspect.isclass(annotation) and issubclass(annotation, enum.Enum):
            return fake.random_element(elements=list(annotation))

        container = _CONTAINER_FACTORIES.get(get_origin(annotation) or annotation)
        if container is not None:
            return container()

        if inspect.isclass(annotation) and depth < self._max_depth:
            try:
                return self._construct(annotation, depth + 1)
            except NoUsableConstructorError:
                # unsupported nested type, left for the caller's default
                return None
        return None


def build_random(target: type[T], *, source: RandomSource | None = None) -> RandomDataBuilder[T]:
    """Start construction of a ``T`` filled with random data."""
    return RandomDataBuilder(target, source=source)


__all__ = ["RandomDataBuilder", "build_random"]
