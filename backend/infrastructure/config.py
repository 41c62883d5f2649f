"""Configuration utilities for infrastructure layer."""

import os


def get_log_level() -> str:
    """
    Get root log level.

    Returns:
        Upper-case level name from LOG_LEVEL, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """
    Get log rendering format.

    Returns:
        "json" or "console" from LOG_FORMAT, defaults to "console"
    """
    fmt = os.getenv("LOG_FORMAT", "console").lower()
    return "json" if fmt == "json" else "console"


def get_app_version() -> str:
    """Get application version (APP_VERSION, defaults to "0.0.0-dev")."""
    return os.getenv("APP_VERSION", "0.0.0-dev")


def get_port() -> int:
    """Get HTTP port for the development server (PORT, defaults to 8000)."""
    return int(os.getenv("PORT", "8000"))
