"""Stubs – ConstructorParametersComparer."""
from __future__ import annotations

import functools
from typing import Any, Callable, Iterable, Sequence

from stubkit.errors import UnassignableParameterError
from stubkit.stubs.typeinfo import EXACT, NOMINAL, STRUCTURAL, match_rank, runtime_type, type_name


class ConstructorParametersComparer:
    """Order arbitrary objects by where they fit in a constructor signature.

    A single object goes to its closest declared type: an exact type match
    beats a subclass, which beats a structural Protocol match; ties go to the
    earlier parameter. For several objects :meth:`assign` hands each one its
    own slot, so ``(count: int, enabled: bool)`` receives ``5`` and ``True``
    in the right places whatever order they arrive in.

    Example::

        comparer = ConstructorParametersComparer([Repository, Notifier])
        comparer.sort([notifier, repository])   # [repository, notifier]
    """

    def __init__(self, parameter_types: Sequence[Any], target: str = "constructor") -> None:
        self._parameter_types = list(parameter_types)
        self._target = target

    @property
    def parameter_types(self) -> list[Any]:
        return list(self._parameter_types)

    def index_of(self, obj: Any) -> int:
        """Index of the declared type *obj* fits best (earliest on a tie)."""
        options = self._options(runtime_type(obj), range(len(self._parameter_types)))
        if not options:
            raise self._unassignable(obj, range(len(self._parameter_types)))
        return min(options, key=lambda slot: (options[slot], slot))

    def compare(self, x: Any, y: Any) -> int:
        """Negative when *x* comes first, positive when *y* does, zero for the same slot."""
        return self.index_of(x) - self.index_of(y)

    __call__ = compare

    @property
    def key(self) -> Callable[[Any], Any]:
        """Sort key for :func:`sorted` / :meth:`list.sort`."""
        return functools.cmp_to_key(self.compare)

    def assign(self, values: Sequence[Any], slots: Iterable[int] | None = None) -> list[int]:
        """Give every value in *values* its own parameter slot.

        Returns the slot index for each value, in the order of *values*.
        Only the indices in *slots* (all of them by default) may be claimed.
        Raises :class:`UnassignableParameterError` for the first value left
        without a slot.
        """
        free = list(range(len(self._parameter_types)) if slots is None else slots)
        placed = self._place(values, free)
        for value, slot in zip(values, placed):
            if slot is None:
                raise self._unassignable(value, [s for s in free if s not in placed])
        return [slot for slot in placed if slot is not None]

    def sort(self, values: Iterable[Any]) -> list[Any]:
        """Return *values* in declared parameter order.

        Values are placed with :meth:`assign`; any that cannot get a slot of
        their own (more values than matching parameters) follow their best
        slot's owner. The sort is stable.
        """
        values = list(values)
        placed = self._place(values, list(range(len(self._parameter_types))))
        positions = [slot if slot is not None else self.index_of(value) for value, slot in zip(values, placed)]
        order = sorted(range(len(values)), key=lambda i: (positions[i], placed[i] is None, i))
        return [values[i] for i in order]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _options(self, value_type: type, slots: Iterable[int]) -> dict[int, int]:
        """Slots *value_type* fits, mapped to the match rank."""
        options: dict[int, int] = {}
        for slot in slots:
            rank = match_rank(self._parameter_types[slot], value_type)
            if rank is not None:
                options[slot] = rank
        return options

    def _place(self, values: Sequence[Any], free: list[int]) -> list[int | None]:
        options = [self._options(runtime_type(value), free) for value in values]
        placed: list[int | None] = [None] * len(values)
        owner: dict[int, int] = {}

        # closest matches first, in supply order
        for rank in (EXACT, NOMINAL, STRUCTURAL):
            for index, fits in enumerate(options):
                if placed[index] is not None:
                    continue
                slot = next((s for s in free if fits.get(s) == rank and s not in owner), None)
                if slot is not None:
                    owner[slot] = index
                    placed[index] = slot

        # then move earlier values aside to make room for the rest
        for index, fits in enumerate(options):
            if placed[index] is None and fits:
                self._augment(index, options, owner, placed, set())
        return placed

    def _augment(
        self,
        index: int,
        options: list[dict[int, int]],
        owner: dict[int, int],
        placed: list[int | None],
        visited: set[int],
    ) -> bool:
        fits = options[index]
        for slot in sorted(fits, key=lambda s: (fits[s], s)):
            if slot in visited:
                continue
            visited.add(slot)
            holder = owner.get(slot)
            if holder is None or self._augment(holder, options, owner, placed, visited):
                owner[slot] = index
                placed[index] = slot
                return True
        return False

    def _unassignable(self, obj: Any, slots: Iterable[int]) -> UnassignableParameterError:
        return UnassignableParameterError(
            self._target,
            type_name(runtime_type(obj)),
            [type_name(self._parameter_types[s]) for s in slots],
        )


__all__ = ["ConstructorParametersComparer"]
