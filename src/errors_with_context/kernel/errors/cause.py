"""Tagged cause variant stored inside an :class:`ErrorMessage`.

The kind of cause is decided once, when the node is built, so rendering never
has to inspect types again.
"""

from __future__ import annotations

import dataclasses
import pickle
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from errors_with_context.kernel.errors.message import ErrorMessage


@dataclasses.dataclass(frozen=True, slots=True)
class ChainCause:
    """The wrapped failure is another chain node."""

    node: ErrorMessage

    @property
    def error(self) -> ErrorMessage:
        return self.node


@dataclasses.dataclass(frozen=True, slots=True)
class ForeignCause:
    """The wrapped failure is an exception not produced by this library.

    Foreign causes are always leaves: they are rendered, never unwrapped.
    """

    error: BaseException

    def debug_text(self) -> str:
        """Terminal line of the flat chain text."""
        return repr(self.error)

    def display_text(self) -> str:
        """Message used for the structured and serialized forms."""
        return str(self.error)


type ErrorCause = ChainCause | ForeignCause


def make_cause(error: BaseException, *, require_transferable: bool = False) -> ErrorCause:
    """Classify *error* as a chain node or a foreign leaf.

    Raises:
        TypeError: *error* is not an exception, or ``require_transferable`` is
            set and *error* cannot be pickled.
    """
    from errors_with_context.kernel.errors.message import ErrorMessage

    if isinstance(error, ErrorMessage):
        return ChainCause(error)
    if not isinstance(error, BaseException):
        raise TypeError(
            f"cause must be an exception instance, got {type(error).__name__}"
        )
    if require_transferable:
        _check_transferable(error)
    return ForeignCause(error)


def _check_transferable(error: BaseException) -> None:
    try:
        pickle.dumps(error)
    except Exception as exc:
        raise TypeError(
            f"cause {type(error).__name__} cannot be transferred across process boundaries"
        ) from exc


__all__ = ["ChainCause", "ErrorCause", "ForeignCause", "make_cause"]
