"""Local command execution with captured output."""

import asyncio
import logging
from collections.abc import Sequence

from cmd_runner.config import get_settings
from cmd_runner.models import CommandResult

logger = logging.getLogger(__name__)


class SpawnError(Exception):
    """The executable could not be launched."""

    def __init__(self, exe_path: str, original_error: Exception):
        """Initialize spawn error.

        Args:
            exe_path: Path of the executable that failed to start
            original_error: Error raised while starting it (OSError, or
                ValueError for paths and args the OS cannot accept)
        """
        self.exe_path = exe_path
        self.original_error = original_error
        super().__init__(str(original_error))


def _decode(data: bytes | None, encoding: str) -> str:
    if not data:
        return ""
    return data.decode(encoding, errors="replace")


def _exit_code(returncode: int) -> int:
    """Report death by signal N as 128 + N, the way shells do."""
    if returncode < 0:
        return 128 - returncode
    return returncode


async def run_command(exe_path: str, args: Sequence[str] = ()) -> CommandResult:
    """Run an executable and capture its output.

    The child gets no stdin. Both output streams are read fully into memory
    and decoded, replacing invalid sequences. A non-zero exit is reported
    through ``CommandResult.ok``, never raised.

    Args:
        exe_path: Executable to run
        args: Arguments passed to the executable

    Returns:
        CommandResult with stdout, stderr and exit code.

    Raises:
        SpawnError: If the executable cannot be launched.
    """
    logger.debug("Spawning %s with %d args", exe_path, len(args))
    try:
        process = await asyncio.create_subprocess_exec(
            exe_path,
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (OSError, ValueError) as e:
        logger.warning("Failed to spawn %s: %s", exe_path, e)
        raise SpawnError(exe_path, e) from e

    try:
        stdout, stderr = await process.communicate()
    finally:
        if process.returncode is None:
            # Interrupted before exit; don't leave the child behind
            process.kill()
            await process.wait()

    encoding = get_settings().encoding
    result = CommandResult(
        stdout=_decode(stdout, encoding),
        stderr=_decode(stderr, encoding),
        exit_code=_exit_code(process.returncode),
    )
    logger.debug("%s exited with code %d", exe_path, result.exit_code)
    return result
