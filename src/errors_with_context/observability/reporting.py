"""Observability – top-level reporting of error chains."""
from __future__ import annotations

import functools
import sys
from typing import Any, Callable, NoReturn, TextIO, TypeVar

from errors_with_context.kernel.errors.message import ErrorMessage
from errors_with_context.kernel.types.result import Err
from errors_with_context.observability.logging.processors import ErrorChainProcessor, get_logger

T = TypeVar("T")

_log = get_logger(__name__)


def report_error(error: ErrorMessage, logger: Any = None, event: str = "error", **extra: Any) -> None:
    """Log *error* at error level under the ``error`` key.

    The chain is expanded here, so the output does not depend on whether the
    logging pipeline includes :class:`ErrorChainProcessor`. Extra fields are
    merged in, but ``error`` and ``depth`` always describe *error*.
    """
    fields = {**extra, "error": error, "depth": error.depth}
    fields = ErrorChainProcessor()(None, "error", fields)
    (logger or _log).error(event, **fields)


def _fail(error: BaseException, stream: TextIO | None) -> NoReturn:
    print(f"Error: {error!r}", file=stream or sys.stderr)
    raise SystemExit(1)


def exit_on_error(func: Callable[..., T], stream: TextIO | None = None) -> Callable[..., T]:
    """Wrap a ``main``-style callable.

    If it raises an :class:`ErrorMessage` or returns an ``Err``, print
    ``Error: <repr>`` and exit with status 1. Otherwise pass its return
    value through::

        @exit_on_error
        def main() -> Result[None, ErrorMessage]:
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            outcome = func(*args, **kwargs)
        except ErrorMessage as exc:
            _fail(exc, stream)
        if isinstance(outcome, Err):
            _fail(outcome.error, stream)
        return outcome

    return wrapper


__all__ = ["exit_on_error", "report_error"]
