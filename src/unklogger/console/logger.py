"""Console – the logger facade.

Usage::

    from unklogger import logger

    logger.info("Server started")                   # 2024-06-15 12:00:00 | Server started
    logger.warn("Cache", "miss rate", 0.4)           # ... | [Cache] miss rate 0.4
    logger.error(["db", "write"], exc)              # ... | [db] [write] Traceback ...

    logger.add_hook("beforeWrite", lambda ctx: ...)
    logger.add_extension("notify", lambda ctx, who: ...)
    logger.success("Deploy", "done").notify("ops")
"""
from __future__ import annotations

import enum
from typing import Any

from unklogger.config.settings import EnvSettingsLoader, SettingsFactory
from unklogger.console.colors import ColorDecorator, green, red, yellow
from unklogger.console.config import LoggerConfig
from unklogger.console.context import Context
from unklogger.console.extensions import Extension, ExtensionRegistry
from unklogger.console.formatter import format_message
from unklogger.console.hooks import AFTER_WRITE, BEFORE_WRITE, Hook, HookRegistry
from unklogger.console.sinks import Sink
from unklogger.kernel.errors import UnknownHookEventError, ValidationError
from unklogger.kernel.time import Clock
from unklogger.observability.logging import get_logger

__all__ = ["REPORT_TAG", "Severity", "Unklogger"]

REPORT_TAG = "unklogger"

_log = get_logger(__name__)


class Severity(str, enum.Enum):
    """Logger entry points; each picks a console sink and a color."""

    LOG = "log"
    INFO = "info"
    SUCCESS = "success"
    WARN = "warn"
    ERROR = "error"

    @property
    def sink_name(self) -> str:
        return "log" if self is Severity.SUCCESS else self.value

    @property
    def color(self) -> ColorDecorator | None:
        return _COLORS.get(self)


_COLORS: dict[Severity, ColorDecorator] = {
    Severity.SUCCESS: green,
    Severity.WARN: yellow,
    Severity.ERROR: red,
}


class Unklogger:
    """Timestamped, tag-prefixed console logger with hooks and extensions.

    Each instance owns its configuration and registries; use :meth:`new`
    for a fresh instance or :meth:`clone` for an independent copy of this
    one.
    """

    def __init__(self, config: LoggerConfig | None = None, *, clock: Clock | None = None) -> None:
        self.config = config if config is not None else LoggerConfig()
        self.clock = clock
        self._hooks = HookRegistry()
        self._extensions = ExtensionRegistry()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, *, clock: Clock | None = None, **overrides: Any) -> Unklogger:
        """Build a logger whose config reads ``UNKLOGGER_*`` variables."""
        config = SettingsFactory.create(
            LoggerConfig,
            loaders=[EnvSettingsLoader()],
            overrides=overrides or None,
        )
        return cls(config, clock=clock)

    def new(self) -> Unklogger:
        """Fresh instance: default config, empty registries, same clock."""
        return type(self)(clock=self.clock)

    def clone(self) -> Unklogger:
        """Independent copy of this instance's config, hooks and extensions."""
        twin = type(self)(self.config.copy(), clock=self.clock)
        twin._hooks = self._hooks.copy()
        twin._extensions = self._extensions.copy()
        _log.debug("logger_cloned", hooks=len(twin._hooks), extensions=len(twin._extensions))
        return twin

    # ------------------------------------------------------------------
    # Configuration shortcuts
    # ------------------------------------------------------------------

    @property
    def quiet(self) -> bool:
        return self.config.quiet

    @quiet.setter
    def quiet(self, value: bool) -> None:
        self.config.quiet = value

    @property
    def colors_enabled(self) -> bool:
        return self.config.colors

    @colors_enabled.setter
    def colors_enabled(self, value: bool) -> None:
        self.config.colors = value

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def log(self, *arguments: Any) -> Context:
        return self._write(Severity.LOG, arguments)

    def info(self, *arguments: Any) -> Context:
        return self._write(Severity.INFO, arguments)

    def success(self, *arguments: Any) -> Context:
        return self._write(Severity.SUCCESS, arguments)

    def warn(self, *arguments: Any) -> Context:
        return self._write(Severity.WARN, arguments)

    def error(self, *arguments: Any) -> Context:
        return self._write(Severity.ERROR, arguments)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_hook(self, event: str, fn: Hook) -> Unklogger:
        """Run *fn(context)* at *event* (``beforeWrite`` or ``afterWrite``).

        An unknown event is reported on the ``warn`` channel, a
        non-callable *fn* on the ``error`` channel; neither raises.
        """
        try:
            self._hooks.register(event, fn)
        except ValidationError as exc:
            self._report(exc)
        return self

    def add_extension(self, name: str, fn: Extension) -> Unklogger:
        """Bind *fn(context, ...)* as ``name`` on every returned context.

        A non-string *name* or non-callable *fn* is reported on the
        ``error`` channel and not registered.
        """
        try:
            self._extensions.register(name, fn)
        except ValidationError as exc:
            self._report(exc)
        return self

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    @property
    def extensions(self) -> ExtensionRegistry:
        return self._extensions

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _sink(self, severity: Severity) -> Sink:
        return getattr(self.config.console, severity.sink_name)

    def _write(self, severity: Severity, arguments: tuple[Any, ...]) -> Context:
        context = format_message(arguments, self.clock)

        self._hooks.run(BEFORE_WRITE, context)

        if not self.config.quiet:
            color = severity.color
            if self.config.colors and color is not None:
                self._sink(severity)(color(context.output))
            else:
                self._sink(severity)(context.output)

        self._hooks.run(AFTER_WRITE, context)

        return self._extensions.bind(context)

    def _report(self, exc: ValidationError) -> None:
        _log.debug("registration_rejected", code=exc.code, reason=exc.message)
        if isinstance(exc, UnknownHookEventError):
            self.warn(REPORT_TAG, exc.message)
        else:
            self.error(REPORT_TAG, exc.message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(quiet={self.config.quiet}, colors={self.config.colors}, "
            f"hooks={len(self._hooks)}, extensions={len(self._extensions)})"
        )
