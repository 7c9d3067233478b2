"""Contextualize optional values, results and raised exceptions."""
from errors_with_context.kernel.context.with_context import (
    ErrorContext,
    error_context,
    with_context,
    with_dynamic_context,
)

__all__ = ["ErrorContext", "error_context", "with_context", "with_dynamic_context"]
