"""Console – message formatter.

Turns the raw arguments of a log call into a :class:`Context`::

    format_message(["Tag", "hello", 42])
    # Context(tags=["Tag"], message="hello 42",
    #         output="2024-06-15 12:00:00 | [Tag] hello 42", ...)
"""
from __future__ import annotations

from typing import Any, Iterable, Sequence

from unklogger.console.context import Context
from unklogger.console.serializer import ValueKind, classify, serialize
from unklogger.kernel.time import Clock, now

__all__ = [
    "ERROR_SEPARATOR",
    "SEPARATOR",
    "format_message",
    "join_payload",
    "render_tags",
    "split_tags",
]

SEPARATOR = " "
ERROR_SEPARATOR = "\n"


def split_tags(arguments: Sequence[Any]) -> tuple[list[Any], list[Any]]:
    """Split *arguments* into ``(tags, payload)``.

    Only a call with more than one argument carries tags: the first
    argument is taken as the tag specification, a list or tuple verbatim,
    any other value as a single tag.
    """
    payload = list(arguments)
    if len(payload) <= 1:
        return [], payload
    first = payload.pop(0)
    tags = list(first) if isinstance(first, (list, tuple)) else [first]
    return tags, payload


def render_tags(tags: Iterable[Any]) -> str:
    return "".join(f"[{tag}] " for tag in tags)


def join_payload(payload: Iterable[Any]) -> str:
    """Serialize and join payload values; tracebacks end their own line."""
    parts: list[str] = []
    for value in payload:
        parts.append(serialize(value))
        parts.append(ERROR_SEPARATOR if classify(value) is ValueKind.ERROR_LIKE else SEPARATOR)
    return "".join(parts).rstrip()


def format_message(arguments: Sequence[Any], clock: Clock | None = None) -> Context:
    tags, payload = split_tags(arguments)
    context = Context(
        timestamp=now(clock),
        tags=tags,
        message=join_payload(payload),
        arguments=list(arguments),
    )
    context.output = f"{context.timestamp} | {render_tags(context.tags)}{context.message}"
    return context
