"""
errors_with_context – attach human-readable context to failures.

Wherever a failure is passed up the stack, describe what was being done::

    from errors_with_context.prelude import *

    def load_config(path) -> Result[Config, ErrorMessage]:
        return read_file(path).with_dyn_err_context(lambda: f"Failed to read file '{path}'")

    load_config("config.json").with_err_context("Failed to load configuration")

The resulting ``ErrorMessage`` prints like a short stack trace::

    Failed to load configuration
      caused by: Failed to read file 'config.json'
      caused by: FileNotFoundError(2, 'No such file or directory')
"""

from errors_with_context.kernel import (
    DebugStyle,
    Err,
    ErrorContext,
    ErrorMessage,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    error_context,
    error_dyn_if_false,
    error_dyn_if_true,
    error_if_false,
    error_if_true,
    with_context,
    with_dynamic_context,
)

__version__ = "0.1.0"
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
    "__version__",
    "error_context",
    "error_dyn_if_false",
    "error_dyn_if_true",
    "error_if_false",
    "error_if_true",
    "with_context",
    "with_dynamic_context",
]
