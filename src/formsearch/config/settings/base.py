"""Config settings – Settings base class and SearchSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from formsearch.config.validation.errors import InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class SearchSettings(Settings):
    """Engine-wide search settings, read from ``SEARCH_*`` variables.

    ``max_page_size`` bounds how many records one page may take, whatever
    the form asks for.
    """

    _prefix: ClassVar[str] = "SEARCH"

    max_page_size: int = 1000
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        if self.max_page_size < 1:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be >= 1")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["SearchSettings", "Settings"]
