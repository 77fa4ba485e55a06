"""Tests for local command execution."""

import asyncio
import sys
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from cmd_runner.models import CommandResult
from cmd_runner.services.runner import SpawnError, run_command


@pytest.mark.asyncio
async def test_run_command_success(python: str) -> None:
    """Exit code 0 is reported as ok."""
    result = await run_command(python, ["-c", "print('hello')"])

    assert isinstance(result, CommandResult)
    assert result.ok is True
    assert result.exit_code == 0
    assert result.stdout.strip() == "hello"
    assert result.stderr == ""


@pytest.mark.asyncio
async def test_run_command_nonzero_exit_does_not_raise(python: str) -> None:
    """A non-zero exit is reported through ok, not raised."""
    result = await run_command(python, ["-c", "import sys; sys.exit(7)"])

    assert result.ok is False
    assert result.exit_code == 7


@pytest.mark.asyncio
async def test_run_command_captures_both_streams_exactly(python: str) -> None:
    """Captured text equals exactly what the child wrote."""
    script = (
        "import sys\n"
        "sys.stdout.buffer.write('out \\u00e9\\u4e2d\\n line2'.encode('utf-8'))\n"
        "sys.stderr.buffer.write('err \\u2603'.encode('utf-8'))\n"
    )

    result = await run_command(python, ["-c", script])

    assert result.stdout == "out \u00e9\u4e2d\n line2"
    assert result.stderr == "err \u2603"


@pytest.mark.asyncio
async def test_run_command_replaces_invalid_utf8(python: str) -> None:
    """Undecodable bytes are replaced instead of raising."""
    script = "import sys; sys.stdout.buffer.write(b'ok\\xff')"

    result = await run_command(python, ["-c", script])

    assert result.stdout == "ok\ufffd"


@pytest.mark.asyncio
async def test_run_command_passes_arguments_verbatim(python: str) -> None:
    """Arguments reach the child unchanged, without shell interpretation."""
    script = "import sys; print('|'.join(sys.argv[1:]))"

    result = await run_command(python, ["-c", script, "a b", "$HOME", "*"])

    assert result.stdout.strip() == "a b|$HOME|*"


@pytest.mark.asyncio
async def test_run_command_does_not_attach_stdin(python: str) -> None:
    """The child reads EOF from stdin immediately."""
    script = "import sys; print(repr(sys.stdin.read()))"

    result = await run_command(python, ["-c", script])

    assert result.stdout.strip() == "''"


@pytest.mark.asyncio
async def test_run_command_missing_executable_raises_spawn_error(tmp_path) -> None:
    """A missing executable raises SpawnError with the OS error attached."""
    missing = str(tmp_path / "does-not-exist")

    with pytest.raises(SpawnError) as exc_info:
        await run_command(missing)

    assert exc_info.value.exe_path == missing
    assert isinstance(exc_info.value.original_error, FileNotFoundError)
    assert str(exc_info.value) == str(exc_info.value.original_error)


@pytest.mark.asyncio
@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
async def test_run_command_non_executable_raises_spawn_error(tmp_path) -> None:
    """A file without execute permission raises SpawnError."""
    script = tmp_path / "script.sh"
    script.write_text("#!/bin/sh\necho hi\n")
    script.chmod(0o644)

    with pytest.raises(SpawnError) as exc_info:
        await run_command(str(script))

    assert isinstance(exc_info.value.original_error, PermissionError)


@pytest.mark.asyncio
async def test_run_command_uses_configured_encoding(
    python: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Output is decoded with CMD_RUNNER_ENCODING."""
    monkeypatch.setenv("CMD_RUNNER_ENCODING", "latin-1")
    script = "import sys; sys.stdout.buffer.write(b'caf\\xe9')"

    result = await run_command(python, ["-c", script])

    assert result.stdout == "caf\u00e9"


@pytest.mark.asyncio
async def test_run_command_kills_child_when_interrupted() -> None:
    """A child still running when the wait is interrupted is killed and reaped."""
    process = MagicMock()
    process.returncode = None
    process.communicate = AsyncMock(side_effect=asyncio.CancelledError())
    process.wait = AsyncMock(return_value=-9)

    with patch(
        "cmd_runner.services.runner.asyncio.create_subprocess_exec",
        AsyncMock(return_value=process),
    ):
        with pytest.raises(asyncio.CancelledError):
            await run_command("/bin/sleep", ["100"])

    process.kill.assert_called_once()
    process.wait.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("exe_path", "args"),
    [("/bin/ec\0ho", ["x"]), ("/bin/echo", ["a\0b"])],
)
async def test_run_command_embedded_null_raises_spawn_error(
    exe_path: str, args: list[str]
) -> None:
    """Paths and args the OS cannot accept raise SpawnError."""
    with pytest.raises(SpawnError) as exc_info:
        await run_command(exe_path, args)

    assert isinstance(exc_info.value.original_error, ValueError)
    assert "null" in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
async def test_run_command_killed_by_signal_reports_128_plus_signo(python: str) -> None:
    """A child killed by SIGKILL reports exit code 137."""
    script = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"

    result = await run_command(python, ["-c", script])

    assert result.ok is False
    assert result.exit_code == 137
