"""Entry point for running a single command in script mode."""

import asyncio
import logging
import sys

from cmd_runner.log import configure_logging
from cmd_runner.services import run_command_or_exit

logger = logging.getLogger(__name__)

USAGE = "usage: cmd-runner EXE [ARG ...]"


def main(argv: list[str] | None = None) -> None:
    """Run EXE with ARGs, echo its stdout, and exit with its code on failure."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    configure_logging()
    exe_path, *args = argv
    logger.info("Running %s", exe_path)
    stdout = asyncio.run(run_command_or_exit(exe_path, args))
    sys.stdout.write(stdout)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
