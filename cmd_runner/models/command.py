"""Command execution data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Result of a local command execution."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        """Whether the command exited with code 0."""
        return self.exit_code == 0


@dataclass(frozen=True)
class CommandFailure:
    """Why a script-mode command did not succeed."""

    name: str
    exit_code: int
    message: str
