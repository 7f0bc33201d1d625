"""Config – env-based settings for the error runtime."""
from xerror.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from xerror.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from xerror.config.settings import ErrorSettings, Settings

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ErrorSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
