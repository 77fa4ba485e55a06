"""Run child processes and collect their output."""

from cmd_runner.models import CommandFailure, CommandResult
from cmd_runner.services import (
    FailureHandler,
    SpawnError,
    check_command,
    run_command,
    run_command_or_exit,
)

__all__ = [
    "CommandFailure",
    "CommandResult",
    "FailureHandler",
    "SpawnError",
    "check_command",
    "run_command",
    "run_command_or_exit",
]
