"""Observability – library-internal diagnostics."""

from unklogger.observability.logging import get_logger

__all__ = ["get_logger"]
