"""Unit tests for structlog configuration and processors."""
from __future__ import annotations

import abc
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from stubkit.observability import LoggerFactory, TypeNameProcessor, get_logger
from stubkit.observability.logging.factory import HANDLER_NAME
from stubkit.stubs import create_with_bare_mocks


class Store(abc.ABC):
    @abc.abstractmethod
    def save(self) -> None: ...


class Service:
    def __init__(self, store: Store, name: str) -> None:
        self.store = store
        self.name = name


class Repo:
    pass


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestTypeNameProcessor:
    def test_renders_types(self) -> None:
        event = TypeNameProcessor()(None, "debug", {"target": Repo, "builtin": int, "count": 2})
        assert event == {"target": f"{__name__}.Repo", "builtin": "int", "count": 2}

    def test_renders_type_sequences(self) -> None:
        event = TypeNameProcessor()(None, "debug", {"types": (Repo, str), "mixed": [Repo, 1]})
        assert event["types"] == [f"{__name__}.Repo", "str"]
        assert event["mixed"] == [Repo, 1]

    def test_empty_list_untouched(self) -> None:
        assert TypeNameProcessor()(None, "debug", {"types": []}) == {"types": []}


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger(__name__, target="Repo").info("built")
        assert logs == [{"event": "built", "target": "Repo", "log_level": "info"}]


@pytest.mark.usefixtures("restore_logging")
class TestUnconfiguredLogging:
    def test_building_a_stub_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        structlog.reset_defaults()
        logging.getLogger().setLevel(logging.WARNING)
        create_with_bare_mocks(Service)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_debug_events_reach_stdlib_handlers(self, caplog: pytest.LogCaptureFixture) -> None:
        structlog.reset_defaults()
        with caplog.at_level(logging.DEBUG, logger="stubkit"):
            create_with_bare_mocks(Service)
        assert any("stub.finished" in record.getMessage() for record in caplog.records)


@pytest.mark.usefixtures("restore_logging")
class TestLoggerFactory:
    def test_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.addHandler(logging.NullHandler())
        LoggerFactory.configure(logging.INFO)
        assert [h.get_name() for h in root.handlers] == [HANDLER_NAME]
        assert root.level == logging.INFO

    def test_keeps_foreign_handlers(self) -> None:
        root = logging.getLogger()
        foreign = logging.NullHandler()
        root.addHandler(foreign)
        LoggerFactory.configure("debug", replace_handlers=False)
        LoggerFactory.configure("debug", replace_handlers=False)
        assert foreign in root.handlers
        assert [h.get_name() for h in root.handlers].count(HANDLER_NAME) == 1
        assert root.level == logging.DEBUG

    def test_json_rendering(self, capsys: pytest.CaptureFixture[str]) -> None:
        LoggerFactory.configure(logging.DEBUG, json=True)
        get_logger("stubkit.test").debug("stub.finished", target=Repo)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "stub.finished"
        assert payload["target"] == f"{__name__}.Repo"
        assert payload["level"] == "debug"
