"""Console – logger configuration."""
from __future__ import annotations

import copy
import dataclasses
from typing import ClassVar

from unklogger.config.settings import Settings
from unklogger.config.validation import InvalidSettingValueError
from unklogger.console.sinks import Console

__all__ = ["LoggerConfig"]


@dataclasses.dataclass
class LoggerConfig(Settings):
    """Per-instance logger settings.

    ``quiet`` and ``colors`` can come from ``UNKLOGGER_QUIET`` /
    ``UNKLOGGER_COLORS`` via :class:`~unklogger.config.settings.EnvSettingsLoader`.
    Values are checked when the config is built; later assignments are
    plain attribute writes.
    """

    _prefix: ClassVar[str] = "UNKLOGGER"

    quiet: bool = False
    colors: bool = True
    console: Console = dataclasses.field(default_factory=Console)

    def _validate(self) -> None:
        for name in ("quiet", "colors"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidSettingValueError(name, value, "expected a bool")
        if not isinstance(self.console, Console):
            raise InvalidSettingValueError("console", self.console, "expected a Console")

    def copy(self) -> LoggerConfig:
        """New config with the same values; sinks are shared, not copied."""
        twin = copy.copy(self)
        twin.console = copy.copy(self.console)
        return twin
