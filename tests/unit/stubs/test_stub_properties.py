"""Property-based tests for the stub builder (hypothesis)."""
from __future__ import annotations

import abc

from hypothesis import given
from hypothesis import strategies as st

from stubkit import build, create_with_bare_mocks
from stubkit.stubs import ConstructorParametersComparer


class Reader(abc.ABC):
    @abc.abstractmethod
    def read(self) -> bytes: ...


class Writer(abc.ABC):
    @abc.abstractmethod
    def write(self, data: bytes) -> None: ...


class FileReader(Reader):
    def read(self) -> bytes:
        return b""


class FileWriter(Writer):
    def write(self, data: bytes) -> None:
        pass


class Pipe:
    def __init__(self, reader: Reader, writer: Writer, label: str, buffer_size: int) -> None:
        self.reader = reader
        self.writer = writer
        self.label = label
        self.buffer_size = buffer_size


class Counter:
    def __init__(self, count: int, enabled: bool, label: str) -> None:
        self.count = count
        self.enabled = enabled
        self.label = label


READER = FileReader()
WRITER = FileWriter()


class TestSupplyOrderProperty:
    @given(st.permutations([READER, WRITER, "pipe", 4096]))
    def test_any_supply_order_builds_the_same_pipe(self, values: list[object]) -> None:
        pipe = build(Pipe).with_these(*values).finish()
        assert pipe.reader is READER
        assert pipe.writer is WRITER
        assert pipe.label == "pipe"
        assert pipe.buffer_size == 4096

    @given(st.permutations([READER, WRITER, "pipe", 4096]))
    def test_comparer_restores_declared_order(self, values: list[object]) -> None:
        comparer = ConstructorParametersComparer([Reader, Writer, str, int])
        assert comparer.sort(values) == [READER, WRITER, "pipe", 4096]

    @given(st.sets(st.sampled_from(["reader", "writer", "label", "buffer_size"])))
    def test_partial_supply_then_fill_always_completes(self, supplied: set[str]) -> None:
        available = {"reader": READER, "writer": WRITER, "label": "x", "buffer_size": 1}
        builder = build(Pipe).with_these(*(available[name] for name in sorted(supplied)))
        pipe = builder.fill_gaps_with_bare_mocks().finish()
        for name in supplied:
            assert getattr(pipe, name) is available[name]

    @given(st.permutations([7, False, "hits"]))
    def test_bool_and_int_never_swap(self, values: list[object]) -> None:
        counter = build(Counter).with_these(*values).finish()
        assert counter.count == 7
        assert counter.enabled is False
        assert counter.label == "hits"


class TestBareMockProperty:
    def test_fresh_mocks_each_time(self) -> None:
        first = create_with_bare_mocks(Pipe)
        second = create_with_bare_mocks(Pipe)
        assert first.reader is not second.reader
