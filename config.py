"""
Harness configuration module.

This module defines configuration classes for the environments the
end-to-end suite runs in (local development, CI). Configuration values
are loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float | None = None) -> float | None:
    value = os.environ.get(name)
    if not value:
        return default
    return float(value)


class Config:
    """Base configuration with default settings."""

    # The todo app is expected to be running already; the harness never starts it
    BASE_URL: str = os.environ.get("TODO_BASE_URL", "http://localhost:3000/")

    # Opaque command that returns the fixture database to an empty state
    RESET_DB_COMMAND: str = os.environ.get("TODO_RESET_DB_COMMAND", "make reset-dev-db")
    # None runs the command from the invoking directory (normally the app checkout)
    RESET_DB_CWD: str | None = os.environ.get("TODO_RESET_DB_CWD") or None

    # Reset once more after the whole session
    RESET_AFTER_SUITE: bool = _env_flag("TODO_RESET_AFTER_SUITE", "true")

    # None falls back to Playwright's default timeout
    SIGNAL_TIMEOUT_MS: float | None = _env_float("TODO_SIGNAL_TIMEOUT_MS")

    # Seconds to wait for the app to answer before skipping the e2e suite
    APP_STARTUP_TIMEOUT: int = int(os.environ.get("TODO_APP_STARTUP_TIMEOUT", "5"))

    ALERT_THRESHOLDS_FILE: Path = BASE_DIR / "tests" / "e2e" / "thresholds.yml"


class DevelopmentConfig(Config):
    """Local development configuration."""


class CIConfig(Config):
    """CI configuration: slower shared runners get more slack."""

    SIGNAL_TIMEOUT_MS: float | None = _env_float("TODO_SIGNAL_TIMEOUT_MS", 15000.0)
    APP_STARTUP_TIMEOUT: int = int(os.environ.get("TODO_APP_STARTUP_TIMEOUT", "60"))


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "ci": CIConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, ci).
             If None, uses the TODO_E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TODO_E2E_ENV", "development")
    return config.get(env, config["default"])
