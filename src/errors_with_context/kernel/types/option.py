"""Option[T] monad - Some and Nothing variants with context attachment."""

from __future__ import annotations

from typing import Generic, NoReturn, TypeVar

from errors_with_context.kernel.errors.message import (
    ErrorMessage,
    MessageLike,
    MessageProducer,
    resolve_message,
)
from errors_with_context.kernel.types.result import Err, Ok

T = TypeVar("T")


class Some(Generic[T]):
    """Option with a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def with_err_context(self, message: MessageLike) -> Ok[T]:  # noqa: ARG002
        return Ok(self._value)

    def with_dyn_err_context(self, producer: MessageProducer) -> Ok[T]:  # noqa: ARG002
        return Ok(self._value)

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Generic[T]):
    """Empty option."""

    __slots__ = ()

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError("Called unwrap() on Nothing")

    def with_err_context(self, message: MessageLike) -> Err[ErrorMessage]:
        """An empty option carries no failure, so the new node has no cause."""
        return Err(ErrorMessage(resolve_message(message)))

    def with_dyn_err_context(self, producer: MessageProducer) -> Err[ErrorMessage]:
        return Err(ErrorMessage(producer()))

    def __repr__(self) -> str:
        return "Nothing"


type Option[T] = Some[T] | Nothing[T]

__all__ = ["Nothing", "Option", "Some"]
