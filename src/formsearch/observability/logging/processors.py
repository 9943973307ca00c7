"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from formsearch.observability.logging.protocol import Logger


class SearchContextProcessor:
    """structlog processor that names the search form and record type.

    Reads ``form`` (a :class:`~formsearch.application.search.SearchForm`
    instance) from the event dict and replaces it with ``form`` /
    ``record_type`` class names, so log lines never carry criterion values.

    Usage::

        import structlog
        from formsearch.observability.logging.processors import SearchContextProcessor

        structlog.configure(processors=[SearchContextProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        form = event_dict.get("form")
        if form is not None and not isinstance(form, str):
            event_dict["form"] = type(form).__name__
            record_type = getattr(form, "record_type", None)
            if record_type is not None:
                event_dict.setdefault("record_type", getattr(record_type, "__name__", repr(record_type)))
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> "Logger":
    """Return a bound structlog logger, typed as the :class:`Logger` protocol.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger: Any = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["SearchContextProcessor", "get_logger"]
