"""Config settings – environment-based configuration."""
from orderstream.config.settings.base import Settings
from orderstream.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from orderstream.config.settings.service import DispatchSettings, PipelineSettings

__all__ = [
    "DispatchSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PipelineSettings",
    "Settings",
    "SettingsLoader",
]
