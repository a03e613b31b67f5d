"""Config – env-based settings, loaders and configuration errors."""

from unklogger.config.settings import EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from unklogger.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
