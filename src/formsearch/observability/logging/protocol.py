"""Observability – Logger protocol."""
from __future__ import annotations

from typing import Any, Protocol


class Logger(Protocol):
    """The logging surface the search layer emits through.

    ``debug`` carries per-criterion compile decisions, ``info`` the
    ``search_completed`` summary and ``warning`` rejected forms. structlog
    bound loggers (and their lazy proxies) satisfy it.
    """

    def debug(self, event: str, **kw: Any) -> Any: ...
    def info(self, event: str, **kw: Any) -> Any: ...
    def warning(self, event: str, **kw: Any) -> Any: ...


__all__ = ["Logger"]
