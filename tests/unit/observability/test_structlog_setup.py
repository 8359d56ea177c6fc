"""Unit tests for the structlog setup helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from evtstream.config import EngineSettings
from evtstream.observability.logging import JsonLoggerFactory, configure_logging, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("evtstream.test", stream="clicks").info("hello")
        assert logs == [{"stream": "clicks", "event": "hello", "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_configure_sets_root_level_and_handler(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_output(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        structlog.get_logger("evtstream.test").info("event.recorded", event_name="Click")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        entry = json.loads(line)
        assert entry["event"] == "event.recorded"
        assert entry["event_name"] == "Click"
        assert entry["level"] == "info"

    def test_configure_logging_uses_settings(self, restore_logging: None) -> None:
        configure_logging(EngineSettings(log_level="ERROR", log_json=False))
        assert logging.getLogger().level == logging.ERROR
