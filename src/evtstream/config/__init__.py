"""Config – engine settings, loaders and validation errors."""

from evtstream.config.settings import (
    EngineSettings,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
    load_settings,
)
from evtstream.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EngineSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
