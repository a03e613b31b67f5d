"""Kernel time – Clock port, implementations and the log timestamp format."""
from unklogger.kernel.time.clock import (
    Clock,
    FrozenClock,
    SystemClock,
    format_timestamp,
    now,
)

__all__ = ["Clock", "FrozenClock", "SystemClock", "format_timestamp", "now"]
