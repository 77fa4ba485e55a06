"""Logging setup for command-line use."""

import logging
import sys

from cmd_runner.config import Settings, get_settings
from cmd_runner.utils.console import ColorfulFormatter


def configure_logging(settings: Settings | None = None) -> None:
    """Attach a colorful stderr handler to the cmd_runner logger.

    Library code only emits records; this is called by entry points.
    Colors are disabled when stderr is not a TTY.
    """
    settings = settings or get_settings()
    use_colors = settings.log_colors and sys.stderr.isatty()

    runner_logger = logging.getLogger("cmd_runner")
    runner_logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))

    # Only add handler if not already configured
    if not runner_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        runner_logger.addHandler(handler)
        runner_logger.propagate = False
