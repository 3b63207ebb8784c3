"""Observability – LoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from stubkit.observability.logging.processors import TypeNameProcessor

HANDLER_NAME = "stubkit"


class LoggerFactory:
    """Configure structlog on top of the stdlib root logger.

    stubkit only emits ``debug`` events, so test runs stay quiet unless the
    level is lowered (``STUBKIT_LOG_LEVEL=DEBUG`` or ``configure(logging.DEBUG)``).
    """

    @staticmethod
    def configure(
        level: int | str = logging.WARNING,
        *,
        json: bool = False,
        replace_handlers: bool = True,
    ) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            TypeNameProcessor(),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        if replace_handlers:
            root.handlers.clear()
        else:
            # keep foreign handlers (pytest's capture handlers among them)
            for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
                root.removeHandler(existing)
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["HANDLER_NAME", "LoggerFactory"]
