"""Data models for cmd_runner."""

from cmd_runner.models.command import CommandFailure, CommandResult

__all__ = [
    "CommandFailure",
    "CommandResult",
]
