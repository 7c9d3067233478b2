"""Kernel carrier types - public re-export surface.

Modules:
  result.py  - Ok, Err, Result
  option.py  - Some, Nothing, Option
  boolean.py - error_if_true / error_if_false and their lazy variants
"""

from errors_with_context.kernel.types.boolean import (
    error_dyn_if_false,
    error_dyn_if_true,
    error_if_false,
    error_if_true,
)
from errors_with_context.kernel.types.option import Nothing, Option, Some
from errors_with_context.kernel.types.result import Err, Ok, Result

__all__ = [
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "error_dyn_if_false",
    "error_dyn_if_true",
    "error_if_false",
    "error_if_true",
]
