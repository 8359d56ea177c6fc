"""Config settings – EngineSettings for the stream engine."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, ClassVar

from evtstream.config.settings.base import Settings
from evtstream.config.settings.factory import SettingsFactory
from evtstream.config.settings.loaders import EnvSettingsLoader
from evtstream.config.validation import InvalidSettingValueError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass(frozen=True)
class EngineSettings(Settings):
    """Runtime settings for a :class:`~evtstream.engine.StreamEngine`.

    ``event_name_field`` is the payload key holding the event name
    (``EVTSTREAM_EVENT_NAME_FIELD``). ``log_level`` and ``log_json`` feed
    :func:`~evtstream.observability.logging.configure_logging`.
    """

    _prefix: ClassVar[str] = "EVTSTREAM"

    event_name_field: str = "eventName"
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if not self.event_name_field.strip():
            raise InvalidSettingValueError(
                "event_name_field", self.event_name_field, "must be a non-empty string"
            )
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )
        object.__setattr__(self, "log_level", level)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(overrides: dict[str, Any] | None = None) -> EngineSettings:
    """Build :class:`EngineSettings` from the environment plus *overrides*."""
    return SettingsFactory.create(EngineSettings, [EnvSettingsLoader()], overrides)


__all__ = ["EngineSettings", "load_settings"]
