"""Config settings – 12-factor env-based configuration."""
from todo_abac.config.settings.access import AccessSettings
from todo_abac.config.settings.base import Settings
from todo_abac.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["AccessSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
