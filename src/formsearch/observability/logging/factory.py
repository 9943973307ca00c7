"""Observability – JsonLoggerFactory and configure_logging."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

from formsearch.observability.logging.processors import SearchContextProcessor

if TYPE_CHECKING:
    from formsearch.config.settings import SearchSettings


class JsonLoggerFactory:
    """Configure structlog to render through stdlib logging."""

    @staticmethod
    def configure(level: int = logging.INFO, *, json: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            SearchContextProcessor(),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(settings: "SearchSettings") -> None:
    """Apply ``log_level`` / ``json_logs`` from *settings*."""
    JsonLoggerFactory.configure(settings.level, json=settings.json_logs)


__all__ = ["JsonLoggerFactory", "configure_logging"]
