"""ErrorMessage: an immutable error node with a message and an optional cause."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterator

from errors_with_context.kernel.errors.cause import ChainCause, ErrorCause, make_cause
from errors_with_context.kernel.errors.rendering import render_chain, render_debug

if TYPE_CHECKING:
    from errors_with_context.kernel.types.result import Err
    from errors_with_context.serialization.tree import ErrorTree

type MessageProducer = Callable[[], object]
type MessageLike = object | MessageProducer


def resolve_message(message: MessageLike) -> object:
    """Return *message*, calling it first when it is a zero-argument producer.

    Only called on failure paths.
    """
    if callable(message):
        return message()
    return message


class ErrorMessage(Exception):
    """A failure annotated with what the program was trying to do.

    Each layer of a call stack wraps the failure it received in a new
    ``ErrorMessage``; by the time the error reaches the top it reads like a
    short stack trace::

        >>> inner = FileNotFoundError(2, "No such file or directory")
        >>> err = ErrorMessage("Failed to load configuration", inner)
        >>> print(ErrorMessage("Failed to start the program", err))
        Failed to start the program
          caused by: Failed to load configuration
          caused by: FileNotFoundError(2, 'No such file or directory')

    Args:
        message: Human-readable description; converted with ``str()``.
        cause: Wrapped failure, either another ``ErrorMessage`` or any
            other exception.
    """

    def __init__(self, message: object, cause: BaseException | None = None) -> None:
        text = str(message)
        super().__init__(text)
        self._message = text
        self._cause: ErrorCause | None = None
        if cause is not None:
            from errors_with_context.config.runtime import get_settings

            self._cause = make_cause(
                cause, require_transferable=get_settings().require_transferable
            )
            self.__cause__ = cause

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, message: object) -> ErrorMessage:
        """A node without an underlying cause."""
        return cls(message)

    @classmethod
    def err(cls, message: object) -> Err[ErrorMessage]:
        """``Err(ErrorMessage(message))``, ready to be returned as a failure."""
        from errors_with_context.kernel.types.result import Err

        return Err(cls(message))

    @classmethod
    def with_context(cls, message: object, cause: BaseException) -> ErrorMessage:
        """Wrap *cause* in a new node described by *message*."""
        return cls(message, cause)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> BaseException | None:
        """The wrapped failure, or ``None``."""
        if self._cause is None:
            return None
        return self._cause.error

    @property
    def tagged_cause(self) -> ErrorCause | None:
        return self._cause

    @property
    def depth(self) -> int:
        """Number of levels in the chain, counting a foreign leaf."""
        return len(self.messages())

    def iter_chain(self) -> Iterator[ErrorMessage]:
        """Yield the chain nodes from outermost to innermost."""
        node: ErrorMessage | None = self
        while node is not None:
            yield node
            cause = node.tagged_cause
            node = cause.node if isinstance(cause, ChainCause) else None

    def messages(self) -> list[str]:
        """One message per level; a foreign leaf contributes its ``str()``."""
        result: list[str] = []
        last = self
        for node in self.iter_chain():
            result.append(node.message)
            last = node
        leaf = last.tagged_cause
        if leaf is not None:
            result.append(str(leaf.error))
        return result

    def root_cause(self) -> BaseException:
        """The innermost failure: a foreign exception or the last node."""
        last = self
        for last in self.iter_chain():
            pass
        return last.cause if last.cause is not None else last

    # ------------------------------------------------------------------
    # Structured forms
    # ------------------------------------------------------------------

    def to_tree(self) -> ErrorTree:
        from errors_with_context.serialization.tree import to_tree

        return to_tree(self)

    def to_dict(self) -> dict[str, Any]:
        from errors_with_context.serialization.codec import to_dict

        return to_dict(self)

    def to_json(self, indent: int | None = None) -> str:
        from errors_with_context.serialization.codec import to_json

        return to_json(self, indent=indent)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return render_chain(self)

    def __repr__(self) -> str:
        return render_debug(self)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._message, self.cause))


__all__ = ["ErrorMessage", "MessageLike", "MessageProducer", "resolve_message"]
