"""Text renderings of an :class:`ErrorMessage` chain.

``render_chain`` is the flat, user-facing form::

    Failed to start the program
      caused by: Failed to load configuration
      caused by: FileNotFoundError(2, 'No such file or directory')

``render_struct`` is the nested field dump used by ``repr()`` when
:attr:`DebugStyle.STRUCT` is configured.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from errors_with_context.kernel.errors.cause import ChainCause

if TYPE_CHECKING:
    from errors_with_context.kernel.errors.message import ErrorMessage

CAUSED_BY = "\n  caused by: "


class DebugStyle(StrEnum):
    """How ``repr(ErrorMessage)`` is presented."""

    PRETTY = "pretty"
    STRUCT = "struct"


def render_chain(node: ErrorMessage) -> str:
    """Outermost message first, one ``caused by`` line per wrapped cause."""
    parts = [node.message]
    cause = node.tagged_cause
    while cause is not None:
        parts.append(CAUSED_BY)
        if isinstance(cause, ChainCause):
            parts.append(cause.node.message)
            cause = cause.node.tagged_cause
        else:
            parts.append(cause.debug_text())
            cause = None
    return "".join(parts)


def render_struct(node: ErrorMessage) -> str:
    # Built inside-out so deep chains do not recurse.
    nodes = list(node.iter_chain())
    innermost = nodes[-1].tagged_cause
    text = "None" if innermost is None else innermost.debug_text()
    for current in reversed(nodes):
        text = f"{type(current).__name__}(message={current.message!r}, cause={text})"
    return text


def render_debug(node: ErrorMessage, style: DebugStyle | None = None) -> str:
    """Render *node* for ``repr()`` using *style* or the configured default."""
    if style is None:
        from errors_with_context.config.runtime import get_settings

        style = get_settings().debug_style
    if style is DebugStyle.STRUCT:
        return render_struct(node)
    return render_chain(node)


__all__ = ["CAUSED_BY", "DebugStyle", "render_chain", "render_debug", "render_struct"]
