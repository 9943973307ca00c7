"""Config validation errors."""
from __future__ import annotations

from typing import Any

from formsearch.kernel.errors import BaseError


class ConfigError(BaseError):
    """Search settings could not be loaded or failed validation.

    ``setting_name`` is the environment variable or field at fault, when known.
    """

    default_code = "config_error"

    def __init__(self, message: str, *, setting_name: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.setting_name = setting_name
        if setting_name is not None:
            self.detail.setdefault("setting", setting_name)


class MissingRequiredSettingError(ConfigError):
    """A setting without a default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Environment variable {setting_name} is required", setting_name=setting_name)


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used (bad type or out of range)."""

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            setting_name=setting_name,
            detail={"value": repr(value), "reason": reason},
            cause=cause,
        )
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
