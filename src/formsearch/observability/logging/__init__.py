"""Observability – structured logging ports and helpers."""
from formsearch.observability.logging.protocol import Logger
from formsearch.observability.logging.factory import JsonLoggerFactory, configure_logging
from formsearch.observability.logging.processors import SearchContextProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "SearchContextProcessor",
    "configure_logging",
    "get_logger",
]
