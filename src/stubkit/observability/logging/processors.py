"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog


class TypeNameProcessor:
    """structlog processor that renders ``type`` values as qualified names.

    The builder logs parameter types directly; this keeps rendered events
    short (``pkg.mod.Repo`` instead of ``<class 'pkg.mod.Repo'>``).  Lists and
    tuples of types are rendered element-wise.

    Usage::

        import structlog
        from stubkit.observability.logging.processors import TypeNameProcessor

        structlog.configure(processors=[TypeNameProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, type):
                event_dict[key] = _qualname(value)
            elif isinstance(value, (list, tuple)) and value and all(isinstance(v, type) for v in value):
                event_dict[key] = [_qualname(v) for v in value]
        return event_dict


def _qualname(tp: type) -> str:
    if tp.__module__ == "builtins":
        return tp.__qualname__
    return f"{tp.__module__}.{tp.__qualname__}"


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger that writes through :mod:`logging`.

    Events pass the stdlib level checks of the logger called *name*, so
    stubkit's debug events stay silent until the level is lowered, whether or
    not :meth:`LoggerFactory.configure` has run.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


__all__ = ["TypeNameProcessor", "get_logger"]
