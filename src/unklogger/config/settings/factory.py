"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from unklogger.config.settings.base import Settings
from unklogger.config.settings.loaders import SettingsLoader
from unklogger.config.validation.errors import ConfigError
from unklogger.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


class SettingsFactory:
    """Build a settings object from loaders plus explicit overrides.

    Each loader yields a complete instance; its field values are layered in
    order, so a later loader wins.  *overrides* are applied last.  A loader
    that raises contributes nothing and is reported at debug level.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~unklogger.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Sources consulted in order, e.g. ``[EnvSettingsLoader()]``.
        overrides:
            Field values that beat every loader, e.g. ``{"quiet": True}``.

        Returns
        -------
        T
            The validated settings instance.

        Raises
        ------
        InvalidSettingValueError
            When the merged values fail the class's own validation.
        ConfigError
            When the class can't be built from the merged values at all,
            e.g. an unknown field name in *overrides*.
        """
        values: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                loaded = loader.load(settings_cls)
            except Exception as exc:  # noqa: BLE001 – remaining loaders still apply
                _log.debug(
                    "settings_loader_skipped",
                    loader=type(loader).__name__,
                    error=repr(exc),
                )
                continue
            values.update(
                (field.name, getattr(loaded, field.name))
                for field in dataclasses.fields(loaded)  # type: ignore[arg-type]
            )

        values.update(overrides or {})

        try:
            return settings_cls(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(
                f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc
            ) from exc


__all__ = ["SettingsFactory"]
