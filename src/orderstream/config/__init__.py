"""Config – settings dataclasses, loaders and validation errors."""
from orderstream.config.settings import (
    DispatchSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    PipelineSettings,
    Settings,
    SettingsLoader,
)
from orderstream.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DispatchSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PipelineSettings",
    "Settings",
    "SettingsLoader",
]
