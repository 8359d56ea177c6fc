"""Config settings – 12-factor env-based configuration."""
from evtstream.config.settings.base import Settings
from evtstream.config.settings.engine import EngineSettings, load_settings
from evtstream.config.settings.factory import SettingsFactory
from evtstream.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "EngineSettings",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
