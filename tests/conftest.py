"""Shared fixtures: a frozen clock and a console that records writes."""
from __future__ import annotations

from datetime import datetime

import pytest

from unklogger.console import Console, LoggerConfig, Unklogger
from unklogger.kernel.time import FrozenClock

FROZEN_AT = datetime(2024, 6, 15, 12, 0, 0)
T = "2024-06-15 12:00:00"


class RecordingConsole(Console):
    """Console whose four sinks append ``(sink_name, line)`` to ``lines``."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []
        super().__init__(
            log=self._recorder("log"),
            info=self._recorder("info"),
            warn=self._recorder("warn"),
            error=self._recorder("error"),
        )

    def _recorder(self, name: str):
        def sink(line: str) -> None:
            self.lines.append((name, line))

        return sink


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(FROZEN_AT)


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def log(clock: FrozenClock, console: RecordingConsole) -> Unklogger:
    return Unklogger(LoggerConfig(console=console), clock=clock)


@pytest.fixture
def stamp() -> str:
    """The formatted timestamp of the ``clock`` fixture."""
    return T
