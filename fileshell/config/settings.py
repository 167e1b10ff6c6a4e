"""
Configuration settings for the shell.

Only ambient concerns (logging, output styling) are configurable; command
behaviour never depends on the environment.
"""

import os

from dotenv import load_dotenv

from fileshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_TRUE_VALUES = ("1", "true", "yes", "on")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_log_level("FILESHELL_LOG_LEVEL", "WARNING")
        self.pretty: bool = self._get_bool("FILESHELL_PRETTY", False)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        return value.strip().lower() in _TRUE_VALUES

    def _get_log_level(self, key: str, default: str) -> str:
        value = self._get_env(key, default).strip().upper()
        if value not in _LOG_LEVELS:
            raise ConfigurationError(
                f"{key} must be one of {', '.join(_LOG_LEVELS)}, got '{value}'"
            )
        return value
