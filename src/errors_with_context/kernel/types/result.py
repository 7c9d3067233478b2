"""Result[T, E] monad - Ok and Err variants with context attachment."""

from __future__ import annotations

from typing import Generic, NoReturn, TypeVar

from errors_with_context.kernel.errors.message import (
    ErrorMessage,
    MessageLike,
    MessageProducer,
    resolve_message,
)

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class Ok(Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err() on {self!r}")

    def with_err_context(self, message: MessageLike) -> Ok[T]:  # noqa: ARG002
        return self

    def with_dyn_err_context(self, producer: MessageProducer) -> Ok[T]:  # noqa: ARG002
        return self

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Generic[E]):
    """Error result variant."""

    __slots__ = ("_error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self._error

    def unwrap_err(self) -> E:
        return self._error

    def with_err_context(self, message: MessageLike) -> Err[ErrorMessage]:
        """Wrap the error in an :class:`ErrorMessage` described by *message*.

        A callable *message* is only invoked here, on the failure path.
        """
        return Err(ErrorMessage(resolve_message(message), self._error))

    def with_dyn_err_context(self, producer: MessageProducer) -> Err[ErrorMessage]:
        """Like :meth:`with_err_context` but *producer* is always called."""
        return Err(ErrorMessage(producer(), self._error))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
