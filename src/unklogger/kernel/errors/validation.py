"""Validation errors – rejected hook and extension registrations.

These never escape the logger facade: it catches them and reports the
message on its own ``warn``/``error`` channel.
"""

from __future__ import annotations

from typing import Any

from unklogger.kernel.errors.base import BaseError


class ValidationError(BaseError):
    """A registration argument does not meet validation rules."""

    default_code = "validation_error"


class UnknownHookEventError(ValidationError):
    """The hook event name is not one of the supported events."""

    default_code = "unknown_hook_event"

    def __init__(self, event: Any, supported: tuple[str, ...], **kwargs: Any) -> None:
        names = ", ".join(repr(name) for name in supported)
        super().__init__(
            f"Unknown hook event {event!r}; expected one of {names}",
            detail={"event": repr(event), "supported": list(supported)},
            **kwargs,
        )
        self.event = event


class NotCallableError(ValidationError):
    """A hook or extension callback is not callable."""

    default_code = "not_callable"

    def __init__(self, kind: str, name: Any, value: Any, **kwargs: Any) -> None:
        super().__init__(
            f"{kind} {name!r} must be callable, got {type(value).__name__}",
            detail={"kind": kind, "name": repr(name)},
            **kwargs,
        )
        self.kind = kind
        self.name = name
        self.value = value


class InvalidExtensionNameError(ValidationError):
    """Extension names must be strings."""

    default_code = "invalid_extension_name"

    def __init__(self, name: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Extension name must be a string, got {type(name).__name__}",
            detail={"name": repr(name)},
            **kwargs,
        )
        self.name = name


__all__ = [
    "InvalidExtensionNameError",
    "NotCallableError",
    "UnknownHookEventError",
    "ValidationError",
]
