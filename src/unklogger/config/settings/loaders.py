"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from unklogger.config.settings.base import Settings
from unklogger.config.validation import ConfigError

T = TypeVar("T", bound=Settings)

_TRUTHY = ("1", "true", "yes", "on")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load on/off switches from OS environment variables.

    Only ``bool`` fields are read: ``1``, ``true``, ``yes`` and ``on``
    (any case, surrounding blanks ignored) switch a flag on, any other
    value switches it off.  Unset variables and non-flag fields such as
    sinks keep their defaults.
    """

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.type not in (bool, "bool"):
                continue
            raw = os.environ.get(f"{prefix}_{field.name}".upper().lstrip("_"))
            if raw is not None:
                kwargs[field.name] = raw.strip().lower() in _TRUTHY

        try:
            return settings_class(**kwargs)
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
