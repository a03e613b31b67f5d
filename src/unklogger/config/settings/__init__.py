"""Config settings – env-based configuration."""
from unklogger.config.settings.base import Settings
from unklogger.config.settings.factory import SettingsFactory
from unklogger.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
