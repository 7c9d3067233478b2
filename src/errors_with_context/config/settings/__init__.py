"""Config settings – 12-factor env-based configuration."""
from errors_with_context.config.settings.base import Settings
from errors_with_context.config.settings.context import ContextSettings
from errors_with_context.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
)

__all__ = ["ContextSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
