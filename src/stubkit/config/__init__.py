"""Config – environment-driven settings for stubkit's pytest integration."""
from stubkit.config.factory import SettingsFactory, load_settings
from stubkit.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from stubkit.config.settings import Settings, StubkitSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "StubkitSettings",
    "load_settings",
]
