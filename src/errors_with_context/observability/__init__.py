"""Observability – logging and top-level reporting of error chains."""
from errors_with_context.observability.logging import (
    ErrorChainProcessor,
    JsonLoggerFactory,
    get_logger,
)
from errors_with_context.observability.reporting import exit_on_error, report_error

__all__ = ["ErrorChainProcessor", "JsonLoggerFactory", "exit_on_error", "get_logger", "report_error"]
