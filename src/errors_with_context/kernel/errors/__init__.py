"""Kernel errors: the chain node and its renderings.

Modules:
  message.py   - ErrorMessage
  cause.py     - ChainCause, ForeignCause (tagged cause variant)
  rendering.py - render_chain, render_struct, DebugStyle
"""

from errors_with_context.kernel.errors.cause import ChainCause, ErrorCause, ForeignCause
from errors_with_context.kernel.errors.message import ErrorMessage
from errors_with_context.kernel.errors.rendering import (
    CAUSED_BY,
    DebugStyle,
    render_chain,
    render_debug,
    render_struct,
)

__all__ = [
    "CAUSED_BY",
    "ChainCause",
    "DebugStyle",
    "ErrorCause",
    "ErrorMessage",
    "ForeignCause",
    "render_chain",
    "render_debug",
    "render_struct",
]
