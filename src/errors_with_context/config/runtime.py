"""Process-wide active :class:`ContextSettings`.

Loaded from the environment on first use; ``configure()`` swaps in a new
immutable instance.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from errors_with_context.config.settings.context import ContextSettings
from errors_with_context.config.settings.loaders import EnvSettingsLoader, SettingsLoader

_active: ContextSettings | None = None


def get_settings() -> ContextSettings:
    """Return the active settings, loading them from the environment once.

    Raises:
        ErrorMessage: an ``ERRORS_WITH_CONTEXT_*`` variable is malformed.
            Nothing is cached, so the next call tries again.
    """
    global _active
    if _active is None:
        # Defaults are active while loading: the loader reports bad values as
        # ErrorMessage nodes, and building those nodes reads the settings.
        _active = ContextSettings()
        loaded: ContextSettings | None = None
        try:
            loaded = EnvSettingsLoader().load(ContextSettings)
        finally:
            _active = loaded
        return loaded
    return _active


def configure(
    settings: ContextSettings | None = None,
    *,
    loader: SettingsLoader | None = None,
    **overrides: Any,
) -> ContextSettings:
    """Replace the active settings.

    Args:
        settings: Explicit instance to install. Defaults to the current one.
        loader: Load a fresh instance from this source instead.
        **overrides: Field values applied on top.

    Returns:
        The newly active settings.
    """
    global _active
    if loader is not None:
        base = loader.load(ContextSettings)
    else:
        base = settings if settings is not None else get_settings()
    _active = dataclasses.replace(base, **overrides) if overrides else base
    return _active


def reset_settings() -> None:
    """Forget the active settings; the next read reloads from the environment."""
    global _active
    _active = None


__all__ = ["configure", "get_settings", "reset_settings"]
