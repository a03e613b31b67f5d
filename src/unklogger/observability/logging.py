"""Observability – structlog-backed diagnostics for the library itself.

The console logger never writes its own bookkeeping to the console sinks.
Registration and configuration events go through a structlog logger bound
to the stdlib logger of the emitting module, so they honour whatever
``logging`` configuration the host application has (and stay silent by
default, being debug-level).
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.KeyValueRenderer(key_order=["event"]),
]


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger wrapping ``logging.getLogger(name)``.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger"]
