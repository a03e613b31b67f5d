"""Console – per-call event context."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

__all__ = ["Context"]


@dataclasses.dataclass(eq=False)
class Context:
    """Record of one log call.

    ``output`` is composed once by the formatter as
    ``f"{timestamp} | {rendered tags}{message}"`` and is the field hooks are
    expected to amend.  ``arguments`` holds the original call arguments,
    before the tag argument was split off.

    Extensions bound by the logger live in ``extensions`` and are also
    reachable as attributes::

        ctx = logger.info("FOO")
        ctx.ping()              # same as ctx.extensions["ping"]()
    """

    timestamp: str
    tags: list[Any] = dataclasses.field(default_factory=list)
    message: str = ""
    output: str = ""
    arguments: list[Any] = dataclasses.field(default_factory=list)
    extensions: dict[str, Callable[..., Any]] = dataclasses.field(default_factory=dict)

    def __getattr__(self, name: str) -> Any:
        # Only reached when regular attribute lookup fails.
        if name.startswith("__") or name == "extensions":
            raise AttributeError(name)
        try:
            return self.extensions[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute or extension {name!r}"
            ) from None

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self.extensions})

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view (extensions excluded)."""
        return {
            "timestamp": self.timestamp,
            "tags": list(self.tags),
            "message": self.message,
            "output": self.output,
            "arguments": list(self.arguments),
        }
