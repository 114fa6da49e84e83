"""Tests for structured logging configuration."""

import json
import logging

import pytest
import structlog

from moodboard import config
from moodboard.logging_config import setup_logging


class TestLoggingConfig:
    """Test structlog setup modes."""

    def test_console_mode_does_not_crash(self):
        setup_logging(json_mode=False, level="DEBUG")
        structlog.get_logger().info("test message", key="value")

    def test_level_filtering(self):
        setup_logging(json_mode=False, level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging(json_mode=True)
        setup_logging(json_mode=True)
        assert len(logging.getLogger().handlers) == 1

    def test_processor_chain_configured(self):
        setup_logging(json_mode=True, level="DEBUG")
        assert len(structlog.get_config()["processors"]) >= 2

    @pytest.fixture
    def reset_logging(self):
        yield
        # the capsys stream is gone after the test; rebind to the session stderr
        setup_logging()

    def test_json_events_carry_app_and_callsite(self, reset_logging, capsys):
        setup_logging(json_mode=True, level="INFO")
        structlog.get_logger("moodboard.test").info("export.loaded", entries=3)
        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event["event"] == "export.loaded"
        assert event["entries"] == 3
        assert event["app"] == "moodboard"
        assert event["func_name"] == "test_json_events_carry_app_and_callsite"


class TestConfig:
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("MOODBOARD_EXPORT", "/tmp/x.json")
        monkeypatch.setenv("MOODBOARD_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MOODBOARD_LOG_JSON", "yes")
        assert config.export_path() == "/tmp/x.json"
        assert config.log_level() == "DEBUG"
        assert config.log_json() is True

    def test_defaults(self, monkeypatch):
        for key in ("MOODBOARD_EXPORT", "MOODBOARD_LOG_LEVEL", "MOODBOARD_LOG_JSON"):
            monkeypatch.delenv(key, raising=False)
        assert config.export_path() == "data/entries.json"
        assert config.log_level() == "INFO"
        assert config.log_json() is False
