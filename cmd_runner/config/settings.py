"""Runner settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Runner settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Logging
    log_level: str = field(default="WARNING")
    log_colors: bool = field(default=True)

    # Output decoding
    encoding: str = field(default="utf-8")

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from CMD_RUNNER_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            log_level=cls._get_log_level(),
            log_colors=cls._get_bool("CMD_RUNNER_LOG_COLORS", True),
            encoding=cls._get_encoding(),
        )

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_log_level() -> str:
        """Get log level from environment with validation."""
        value = os.getenv("CMD_RUNNER_LOG_LEVEL", "WARNING").upper()
        if value in LOG_LEVELS:
            return value
        logger.warning("Invalid log level %s, using default WARNING", value)
        return "WARNING"

    @staticmethod
    def _get_encoding() -> str:
        """Get output encoding, falling back to utf-8 for non-text codecs."""
        value = os.getenv("CMD_RUNNER_ENCODING", "utf-8")
        try:
            b"".decode(value)
        except LookupError:
            logger.warning("Invalid text encoding %s, using default utf-8", value)
            return "utf-8"
        return value


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
