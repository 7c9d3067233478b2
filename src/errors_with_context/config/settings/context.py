"""Config settings – runtime options of the error chain."""
from __future__ import annotations

import dataclasses

from errors_with_context.config.settings.base import Settings
from errors_with_context.kernel.errors.rendering import DebugStyle


@dataclasses.dataclass(frozen=True)
class ContextSettings(Settings):
    """Read from ``ERRORS_WITH_CONTEXT_*`` environment variables.

    Attributes:
        debug_style: ``repr()`` presentation, flat chain text or nested dump.
        require_transferable: reject foreign causes that cannot be pickled.
        log_chain_as_tree: log chains as ``{"message", "cause"}`` trees
            instead of flat text.
    """

    _prefix: dataclasses.ClassVar[str] = "ERRORS_WITH_CONTEXT"

    debug_style: DebugStyle = DebugStyle.PRETTY
    require_transferable: bool = False
    log_chain_as_tree: bool = True

    def _validate(self) -> None:
        if not isinstance(self.debug_style, DebugStyle):
            object.__setattr__(self, "debug_style", DebugStyle(self.debug_style))


__all__ = ["ContextSettings"]
