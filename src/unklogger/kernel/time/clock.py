"""Kernel time – Clock protocol, implementations and timestamp formatting."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract wall clock for deterministic testing."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock returning the current local time."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


_SYSTEM_CLOCK = SystemClock()


def format_timestamp(moment: datetime) -> str:
    """Render *moment* as ``YYYY-MM-DD HH:MM:SS`` (zero-padded, no zone)."""
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def now(clock: Clock | None = None) -> str:
    """Current time of *clock* (system clock by default) as a log timestamp."""
    return format_timestamp((clock or _SYSTEM_CLOCK).now())


__all__ = ["Clock", "FrozenClock", "SystemClock", "format_timestamp", "now"]
