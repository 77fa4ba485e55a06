"""Configuration module for cmd_runner."""

from cmd_runner.config.settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
