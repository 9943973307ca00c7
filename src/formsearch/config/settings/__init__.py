"""Config settings – 12-factor env-based configuration."""
from formsearch.config.settings.base import SearchSettings, Settings
from formsearch.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SearchSettings", "Settings", "SettingsLoader"]
