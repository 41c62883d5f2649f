"""Unit tests for logging configuration."""

import json
import logging

import pytest
import structlog

from infrastructure.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _restore_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_format(self, monkeypatch, capsys):
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        monkeypatch.setenv("LOG_FORMAT", "json")
        configure_logging()
        logger = logging.getLogger("test.json")
        logger.setLevel(logging.INFO)
        handler = logging.StreamHandler()
        logger.addHandler(handler)
        logger.propagate = False

        structlog.get_logger("test.json").info("Streak updated", streak=3)
        logger.removeHandler(handler)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "Streak updated"
        assert event["streak"] == 3
        assert event["level"] == "info"

    def test_level_filtering(self, monkeypatch, capsys):
        monkeypatch.setenv("LOG_FORMAT", "console")
        configure_logging()
        logger = logging.getLogger("test.level")
        logger.setLevel(logging.WARNING)
        handler = logging.StreamHandler()
        logger.addHandler(handler)
        logger.propagate = False

        structlog.get_logger("test.level").info("hidden")
        structlog.get_logger("test.level").warning("shown")
        logger.removeHandler(handler)

        err = capsys.readouterr().err
        assert "shown" in err
        assert "hidden" not in err
