"""Services for cmd_runner."""

from cmd_runner.services.runner import SpawnError, run_command
from cmd_runner.services.script import (
    FailureHandler,
    check_command,
    command_name,
    format_failure,
    report_failure,
    run_command_or_exit,
)

__all__ = [
    "FailureHandler",
    "SpawnError",
    "check_command",
    "command_name",
    "format_failure",
    "report_failure",
    "run_command",
    "run_command_or_exit",
]
