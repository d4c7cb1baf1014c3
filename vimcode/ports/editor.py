"""Editor port interface for launching external editor processes.

Defines the launcher abstraction used by the dispatcher, allowing the
subprocess implementation to be swapped out for testing.
"""

import subprocess
from typing import Protocol


class EditorError(Exception):
    """Base exception for editor-related errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class LaunchFailedError(EditorError):
    """Raised when the editor process could not be started."""

    pass


class NoInstallationSelectedError(EditorError):
    """Raised when dispatch is attempted without a configured editor path."""

    pass


class Launcher(Protocol):
    """Protocol for starting an editor process.

    Implementations must not wait for the process to exit.
    """

    def launch(self, executable_path: str, arguments: str) -> subprocess.Popen:
        """Start the editor with a remote-command argument string.

        Args:
            executable_path: Path to the editor binary.
            arguments: Argument string, parsed by the editor itself.

        Returns:
            Handle of the started process. Callers may drop it.

        Raises:
            NoInstallationSelectedError: If executable_path is empty.
            LaunchFailedError: If the process could not be started.
        """
        ...
