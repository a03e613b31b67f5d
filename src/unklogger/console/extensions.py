"""Console – extension registry.

An extension is a named callback ``fn(context, *args, **kwargs)`` that the
logger binds onto every context it returns, so callers can chain follow-up
behaviour::

    logger.add_extension("notify", lambda ctx, channel: send(channel, ctx.message))
    logger.error("Payment", "card declined").notify("#billing")
"""
from __future__ import annotations

import functools
from typing import Any, Callable

from unklogger.console.context import Context
from unklogger.kernel.errors import InvalidExtensionNameError, NotCallableError
from unklogger.observability.logging import get_logger

__all__ = ["Extension", "ExtensionRegistry"]

Extension = Callable[..., Any]

_log = get_logger(__name__)


class ExtensionRegistry:
    """Named extension callbacks, bound per context."""

    def __init__(self) -> None:
        self._extensions: dict[str, Extension] = {}

    def register(self, name: str, callback: Extension) -> None:
        """Store *callback* under *name*, replacing any previous binding.

        Raises
        ------
        InvalidExtensionNameError
            *name* is not a string.
        NotCallableError
            *callback* is not callable.
        """
        if not isinstance(name, str):
            raise InvalidExtensionNameError(name)
        if not callable(callback):
            raise NotCallableError("Extension", name, callback)
        replaced = name in self._extensions
        self._extensions[name] = callback
        _log.debug("extension_registered", name=name, replaced=replaced)

    def bind(self, context: Context) -> Context:
        """Attach every registered extension to *context* as of now."""
        for name, callback in self._extensions.items():
            context.extensions[name] = functools.partial(callback, context)
        return context

    def names(self) -> list[str]:
        return list(self._extensions)

    def copy(self) -> ExtensionRegistry:
        clone = ExtensionRegistry()
        clone._extensions = dict(self._extensions)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._extensions

    def __len__(self) -> int:
        return len(self._extensions)
