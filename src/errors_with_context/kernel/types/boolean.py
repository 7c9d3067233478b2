"""Turn booleans into results.

Handy for checks that are not errors by themselves::

    error_if_false(path.exists(), f"Expected '{path}' to exist!").unwrap()
"""

from __future__ import annotations

from errors_with_context.kernel.errors.message import (
    ErrorMessage,
    MessageLike,
    MessageProducer,
    resolve_message,
)
from errors_with_context.kernel.types.result import Err, Ok, Result


def error_if_false(value: bool, message: MessageLike) -> Result[bool, ErrorMessage]:
    """``Ok(True)`` when *value* holds, otherwise ``Err`` with *message*."""
    if value:
        return Ok(value)
    return Err(ErrorMessage(resolve_message(message)))


def error_if_true(value: bool, message: MessageLike) -> Result[bool, ErrorMessage]:
    """``Ok(False)`` when *value* does not hold, otherwise ``Err`` with *message*."""
    if value:
        return Err(ErrorMessage(resolve_message(message)))
    return Ok(value)


def error_dyn_if_false(value: bool, producer: MessageProducer) -> Result[bool, ErrorMessage]:
    if value:
        return Ok(value)
    return Err(ErrorMessage(producer()))


def error_dyn_if_true(value: bool, producer: MessageProducer) -> Result[bool, ErrorMessage]:
    if value:
        return Err(ErrorMessage(producer()))
    return Ok(value)


__all__ = ["error_dyn_if_false", "error_dyn_if_true", "error_if_false", "error_if_true"]
