"""Attach context to optional values, results and raised exceptions."""

from __future__ import annotations

import functools
import inspect
from types import TracebackType
from typing import Any, Callable, TypeVar

from errors_with_context.kernel.errors.message import (
    ErrorMessage,
    MessageLike,
    MessageProducer,
    resolve_message,
)
from errors_with_context.kernel.types.option import Nothing, Some
from errors_with_context.kernel.types.result import Err, Ok, Result

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])


@functools.singledispatch
def with_context(value: Any, message: MessageLike) -> Result[Any, ErrorMessage]:  # noqa: ARG001
    """Contextualize *value* with an eagerly supplied *message*.

    * ``None`` and ``Nothing()`` become ``Err(ErrorMessage(message))``.
    * ``Err(e)`` becomes ``Err(ErrorMessage(message, e))``.
    * ``Ok(v)`` is returned as is; ``Some(v)`` and any other value become ``Ok``.

    A callable *message* is invoked only when a failure is being built.
    """
    return Ok(value)


@with_context.register(type(None))
def _(value: None, message: MessageLike) -> Err[ErrorMessage]:  # noqa: ARG001
    return Err(ErrorMessage(resolve_message(message)))


@with_context.register(Ok)
@with_context.register(Err)
@with_context.register(Some)
@with_context.register(Nothing)
def _(value: Any, message: MessageLike) -> Result[Any, ErrorMessage]:
    return value.with_err_context(message)


def with_dynamic_context(value: Any, producer: MessageProducer) -> Result[Any, ErrorMessage]:
    """Same as :func:`with_context`, with a message computed only on failure."""
    return with_context(value, producer)


class ErrorContext:
    """Context manager and decorator that wraps raised exceptions.

    Any :class:`Exception` escaping the guarded block is re-raised as an
    :class:`ErrorMessage` with the original as its cause::

        with error_context("Failed to read config"):
            data = path.read_text()

        @error_context(lambda: f"Failed to load user {user_id}")
        def load_user(user_id): ...

    ``BaseException`` subclasses such as ``KeyboardInterrupt`` pass through
    untouched.
    """

    def __init__(self, message: MessageLike) -> None:
        self._message = message

    def __enter__(self) -> ErrorContext:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False
        raise ErrorMessage(resolve_message(self._message), exc) from exc

    async def __aenter__(self) -> ErrorContext:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        return self.__exit__(exc_type, exc, tb)

    def __call__(self, func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with self:
                    return await func(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with self:
                return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]


def error_context(message: MessageLike) -> ErrorContext:
    """Build an :class:`ErrorContext` guard for *message*."""
    return ErrorContext(message)


__all__ = ["ErrorContext", "error_context", "with_context", "with_dynamic_context"]
