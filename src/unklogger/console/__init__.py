"""Console – formatting pipeline, hooks, extensions and the logger facade."""
from unklogger.console.config import LoggerConfig
from unklogger.console.context import Context
from unklogger.console.extensions import ExtensionRegistry
from unklogger.console.formatter import format_message, render_tags
from unklogger.console.hooks import AFTER_WRITE, BEFORE_WRITE, HOOK_EVENTS, HookRegistry
from unklogger.console.logger import Severity, Unklogger
from unklogger.console.serializer import CIRCULAR_MARKER, ValueKind, classify, serialize
from unklogger.console.sinks import Console, StreamSink

__all__ = [
    "AFTER_WRITE",
    "BEFORE_WRITE",
    "CIRCULAR_MARKER",
    "HOOK_EVENTS",
    "Console",
    "Context",
    "ExtensionRegistry",
    "HookRegistry",
    "LoggerConfig",
    "Severity",
    "StreamSink",
    "Unklogger",
    "ValueKind",
    "classify",
    "format_message",
    "render_tags",
    "serialize",
]
