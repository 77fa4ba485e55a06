"""Fail-fast command execution for scripts."""

import logging
import re
import sys
from collections.abc import Callable, Sequence

from cmd_runner.models import CommandFailure
from cmd_runner.services.runner import SpawnError, run_command

logger = logging.getLogger(__name__)

FailureHandler = Callable[[str, int, str], None]


def command_name(exe_path: str) -> str:
    """Return the last path segment of an executable path.

    Both ``/`` and ``\\`` count as separators.
    """
    return re.split(r"[\\/]", exe_path)[-1] or exe_path


def format_failure(name: str, exit_code: int, message: str) -> str:
    """Format the default failure line."""
    return f"[{name}] (exit code: {exit_code}) stderr-> {message}"


async def check_command(
    exe_path: str,
    args: Sequence[str] = (),
) -> str | CommandFailure:
    """Run a command and return its stdout, or a failure describing why not.

    Returns:
        Captured stdout on exit code 0, otherwise a CommandFailure. Launch
        failures use exit code 1 and the error description as message;
        non-zero exits use stderr, or stdout when stderr is empty.
    """
    name = command_name(exe_path)
    try:
        result = await run_command(exe_path, args)
    except SpawnError as e:
        return CommandFailure(name=name, exit_code=1, message=str(e))

    if result.ok:
        return result.stdout
    return CommandFailure(
        name=name,
        exit_code=result.exit_code,
        message=result.stderr or result.stdout,
    )


def report_failure(
    failure: CommandFailure,
    on_failure: FailureHandler | None = None,
) -> None:
    """Hand a failure to the caller's handler, or print the default line to stderr."""
    if on_failure is not None:
        on_failure(failure.name, failure.exit_code, failure.message)
    else:
        print(
            format_failure(failure.name, failure.exit_code, failure.message),
            file=sys.stderr,
        )


async def run_command_or_exit(
    exe_path: str,
    args: Sequence[str] = (),
    *,
    on_failure: FailureHandler | None = None,
) -> str:
    """Run a command and return its stdout, exiting the process on failure.

    Use run_command when the caller needs to handle failures itself.

    Args:
        exe_path: Executable to run
        args: Arguments passed to the executable
        on_failure: Called with (name, exit_code, message) instead of
            printing the default failure line

    Returns:
        Captured stdout of the command.

    Raises:
        SystemExit: With the command's exit code (1 if it could not start).
    """
    outcome = await check_command(exe_path, args)
    if isinstance(outcome, CommandFailure):
        logger.debug("%s failed with exit code %d", outcome.name, outcome.exit_code)
        report_failure(outcome, on_failure)
        sys.exit(outcome.exit_code)
    return outcome
