"""Pytest configuration and shared fixtures."""

import os
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from vimcode.adapters.settings import InMemorySettingsStore


class RecordingLauncher:
    """Launcher test double that records calls instead of spawning.

    Args:
        error: Exception raised on every launch, after recording the call.
    """

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, str]] = []
        self._error = error

    def launch(self, executable_path: str, arguments: str) -> None:
        self.calls.append((executable_path, arguments))
        if self._error is not None:
            raise self._error


@pytest.fixture
def settings() -> InMemorySettingsStore:
    """Empty in-memory settings store (all preferences at defaults)."""
    return InMemorySettingsStore()


@pytest.fixture
def launcher() -> RecordingLauncher:
    """Launcher that records launch calls."""
    return RecordingLauncher()


@pytest.fixture
def failing_launcher() -> Callable[[Exception], RecordingLauncher]:
    """Factory for launchers that raise the given error."""
    return RecordingLauncher


@pytest.fixture
def make_executable() -> Callable[[Path], Path]:
    """Factory that creates an empty executable file.

    Parent directories are created as needed.
    """

    def _make(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR)
        return path

    return _make


@pytest.fixture
def search_path() -> Callable[..., str]:
    """Factory joining folders into a PATH value for this platform."""

    def _join(*folders: Path) -> str:
        return os.pathsep.join(str(folder) for folder in folders)

    return _join
