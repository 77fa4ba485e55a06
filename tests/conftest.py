"""Shared fixtures for cmd_runner tests."""

import sys
from collections.abc import Iterator

import pytest

from cmd_runner.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Re-read settings from the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def python() -> str:
    """Path of an interpreter usable as a child process."""
    return sys.executable
