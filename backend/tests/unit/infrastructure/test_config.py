"""Unit tests for infrastructure configuration getters."""

from infrastructure.config import (
    get_app_version,
    get_log_format,
    get_log_level,
    get_port,
)


class TestConfig:
    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_FORMAT", "APP_VERSION", "PORT"):
            monkeypatch.delenv(name, raising=False)

        assert get_log_level() == "INFO"
        assert get_log_format() == "console"
        assert get_app_version() == "0.0.0-dev"
        assert get_port() == 8000

    def test_values_are_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")

        assert get_log_level() == "DEBUG"
        assert get_log_format() == "json"

    def test_unknown_log_format_is_console(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")
        assert get_log_format() == "console"

    def test_app_version_from_env(self, monkeypatch):
        monkeypatch.setenv("APP_VERSION", "1.4.2")
        assert get_app_version() == "1.4.2"

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "9001")
        assert get_port() == 9001
