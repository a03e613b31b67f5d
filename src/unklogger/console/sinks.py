"""Console – output sinks.

A sink is any callable accepting one finished line.  :class:`Console`
groups the four sinks a logger writes to; the defaults print to
``sys.stdout`` (``log``/``info``) and ``sys.stderr`` (``warn``/``error``).
"""
from __future__ import annotations

import dataclasses
import sys
from typing import Callable, TextIO

__all__ = ["Console", "Sink", "StreamSink"]

Sink = Callable[[str], object]


class StreamSink:
    """Write lines to a ``sys`` stream looked up at write time.

    Late lookup keeps the sink pointed at whatever ``sys.stdout`` /
    ``sys.stderr`` currently is (pytest capture, redirect_stdout, ...).
    """

    def __init__(self, stream_name: str = "stdout") -> None:
        if stream_name not in ("stdout", "stderr"):
            raise ValueError(f"stream_name must be 'stdout' or 'stderr', got {stream_name!r}")
        self.stream_name = stream_name

    @property
    def stream(self) -> TextIO:
        return getattr(sys, self.stream_name)

    def __call__(self, line: str) -> None:
        stream = self.stream
        stream.write(f"{line}\n")
        stream.flush()

    def __repr__(self) -> str:
        return f"StreamSink({self.stream_name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StreamSink):
            return NotImplemented
        return self.stream_name == other.stream_name

    def __hash__(self) -> int:
        return hash((StreamSink, self.stream_name))


@dataclasses.dataclass
class Console:
    """The four sinks a logger writes to."""

    log: Sink = dataclasses.field(default_factory=lambda: StreamSink("stdout"))
    info: Sink = dataclasses.field(default_factory=lambda: StreamSink("stdout"))
    warn: Sink = dataclasses.field(default_factory=lambda: StreamSink("stderr"))
    error: Sink = dataclasses.field(default_factory=lambda: StreamSink("stderr"))

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            if not callable(getattr(self, field.name)):
                raise TypeError(f"Console.{field.name} must be callable")
