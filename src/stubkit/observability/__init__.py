"""Observability – logging."""

from stubkit.observability.logging import LoggerFactory, TypeNameProcessor, get_logger

__all__ = [
    "LoggerFactory",
    "TypeNameProcessor",
    "get_logger",
]
