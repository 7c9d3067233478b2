"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from errors_with_context.kernel.errors.message import ErrorMessage


class ErrorChainProcessor:
    """structlog processor that expands :class:`ErrorMessage` values.

    For every key in *keys* holding an ``ErrorMessage``, the value is replaced
    by its ``{"message", "cause"}`` tree, or by its flat chain text when
    ``log_chain_as_tree`` is disabled. The configured setting is read on each
    event unless *as_tree* is given.

    Usage::

        structlog.configure(processors=[ErrorChainProcessor(), ...])
        log.error("startup.failed", error=err)
    """

    def __init__(self, keys: tuple[str, ...] = ("error",), *, as_tree: bool | None = None) -> None:
        self._keys = keys
        self._as_tree = as_tree

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        as_tree = self._as_tree
        if as_tree is None:
            from errors_with_context.config.runtime import get_settings

            as_tree = get_settings().log_chain_as_tree
        for key in self._keys:
            value = event_dict.get(key)
            if isinstance(value, ErrorMessage):
                event_dict[key] = value.to_dict() if as_tree else str(value)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ErrorChainProcessor", "get_logger"]
