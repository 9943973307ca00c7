"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, TypeVar

from dotenv import load_dotenv

from formsearch.config.settings.base import Settings
from formsearch.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from ``<PREFIX>_<FIELD>`` environment variables.

    ``SearchSettings`` reads ``SEARCH_MAX_PAGE_SIZE``, ``SEARCH_LOG_LEVEL`` and
    ``SEARCH_JSON_LOGS``. Each value is coerced to the field's declared type
    (``bool``, ``int``, ``float`` or ``str``); one that does not parse raises
    :class:`InvalidSettingValueError` naming the variable.
    """

    def load(self, settings_class: type[T]) -> T:
        prefix = settings_class._prefix
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = self.env_key(prefix, field.name)
            raw = os.environ.get(env_key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(env_key)
                continue
            kwargs[field.name] = self._coerce(env_key, raw.strip(), hints[field.name])

        return settings_class(**kwargs)

    @staticmethod
    def env_key(prefix: str, field_name: str) -> str:
        return f"{prefix}_{field_name}".upper() if prefix else field_name.upper()

    def _coerce(self, env_key: str, raw: str, target: Any) -> Any:
        if target is bool:
            lowered = raw.lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise InvalidSettingValueError(env_key, raw, "expected a boolean")
        if target is int or target is float:
            try:
                return target(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, f"expected {target.__name__}", cause=exc) from exc
        if target is str:
            return raw
        raise ConfigError(f"{env_key}: settings of type {target!r} cannot be read from the environment",
                          setting_name=env_key)


class DotenvSettingsLoader(SettingsLoader):
    """Read a ``.env`` file into the environment, then load as :class:`EnvSettingsLoader`.

    Variables already set win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
