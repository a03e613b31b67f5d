"""Kernel – framework-agnostic building blocks (errors, time)."""

from unklogger.kernel.errors import (
    BaseError,
    InvalidExtensionNameError,
    NotCallableError,
    UnknownHookEventError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "InvalidExtensionNameError",
    "NotCallableError",
    "UnknownHookEventError",
    "ValidationError",
]
