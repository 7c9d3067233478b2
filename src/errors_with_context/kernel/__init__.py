"""Kernel – the chain node, its carriers and the contextualize operations."""

from errors_with_context.kernel.context import (
    ErrorContext,
    error_context,
    with_context,
    with_dynamic_context,
)
from errors_with_context.kernel.errors import DebugStyle, ErrorMessage
from errors_with_context.kernel.types import (
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    error_dyn_if_false,
    error_dyn_if_true,
    error_if_false,
    error_if_true,
)

__all__ = [
    "DebugStyle",
    "Err",
    "ErrorContext",
    "ErrorMessage",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "error_context",
    "error_dyn_if_false",
    "error_dyn_if_true",
    "error_if_false",
    "error_if_true",
    "with_context",
    "with_dynamic_context",
]
