"""Configuration – settings dataclasses, loaders and the active runtime config."""
from errors_with_context.config.runtime import configure, get_settings, reset_settings
from errors_with_context.config.settings import (
    ContextSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)

__all__ = [
    "ContextSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "configure",
    "get_settings",
    "reset_settings",
]
