"""Observability – structured logging helpers."""
from stubkit.observability.logging.factory import LoggerFactory
from stubkit.observability.logging.processors import TypeNameProcessor, get_logger

__all__ = [
    "LoggerFactory",
    "TypeNameProcessor",
    "get_logger",
]
