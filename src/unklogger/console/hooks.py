"""Console – hook registry.

Hooks observe (and may amend) every log event at two fixed stages:

* ``beforeWrite`` – after ``output`` is composed, before it is colorized
  and written.
* ``afterWrite`` – after the write, including writes suppressed by quiet
  mode.

Callbacks run synchronously in registration order and share one
:class:`~unklogger.console.context.Context`.  Their exceptions propagate.
"""
from __future__ import annotations

from typing import Any, Callable

from unklogger.console.context import Context
from unklogger.kernel.errors import NotCallableError, UnknownHookEventError
from unklogger.observability.logging import get_logger

__all__ = ["AFTER_WRITE", "BEFORE_WRITE", "HOOK_EVENTS", "Hook", "HookRegistry"]

BEFORE_WRITE = "beforeWrite"
AFTER_WRITE = "afterWrite"
HOOK_EVENTS: tuple[str, ...] = (BEFORE_WRITE, AFTER_WRITE)

Hook = Callable[[Context], Any]

_log = get_logger(__name__)


class HookRegistry:
    """Ordered hook callbacks per event."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[Hook]] = {event: [] for event in HOOK_EVENTS}

    def register(self, event: str, callback: Hook) -> None:
        """Append *callback* to *event*.

        Raises
        ------
        UnknownHookEventError
            *event* is not one of :data:`HOOK_EVENTS`.
        NotCallableError
            *callback* is not callable.
        """
        if not isinstance(event, str) or event not in self._hooks:
            raise UnknownHookEventError(event, HOOK_EVENTS)
        if not callable(callback):
            raise NotCallableError("Hook", event, callback)
        self._hooks[event].append(callback)
        _log.debug("hook_registered", hook_event=event, count=len(self._hooks[event]))

    def run(self, event: str, context: Context) -> None:
        # Snapshot so a hook registering another hook doesn't extend this run.
        for hook in list(self._hooks[event]):
            hook(context)

    def hooks(self, event: str) -> list[Hook]:
        return list(self._hooks.get(event, ()))

    def copy(self) -> HookRegistry:
        clone = HookRegistry()
        clone._hooks = {event: list(hooks) for event, hooks in self._hooks.items()}
        return clone

    def __len__(self) -> int:
        return sum(len(hooks) for hooks in self._hooks.values())
