"""Utilities for cmd_runner."""

from cmd_runner.utils.console import ColorfulFormatter

__all__ = ["ColorfulFormatter"]
