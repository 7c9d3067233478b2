"""Observability – structured logging helpers."""
from errors_with_context.observability.logging.factory import JsonLoggerFactory
from errors_with_context.observability.logging.processors import ErrorChainProcessor, get_logger

__all__ = ["ErrorChainProcessor", "JsonLoggerFactory", "get_logger"]
