"""Launcher adapter for starting Vim as an external process.

Provides the Launcher port implementation on top of subprocess. The editor
is started detached and never waited on.
"""

import logging
import platform
import shlex
import subprocess

from vimcode.ports.editor import LaunchFailedError, NoInstallationSelectedError

logger = logging.getLogger(__name__)


def is_windows() -> bool:
    return platform.system() == "Windows"


def build_command(executable_path: str, arguments: str) -> str | list[str]:
    """Build the Popen command for an executable and argument string.

    Windows passes a single command line to the child, which parses it
    itself, so the argument string is appended unchanged. POSIX has no such
    command line; the string is split with the same double-quote rules.
    No shell is involved on either platform.

    Args:
        executable_path: Path to the editor binary.
        arguments: Remote-command argument string.

    Returns:
        Command suitable for subprocess.Popen without shell=True.

    Raises:
        ValueError: If the argument string has unbalanced quotes (POSIX).
    """
    if is_windows():
        return f'"{executable_path}" {arguments}'
    return [executable_path, *shlex.split(arguments)]


class SubprocessLauncher:
    """Launcher implementation using subprocess.Popen."""

    def launch(self, executable_path: str, arguments: str) -> subprocess.Popen:
        """Start the editor without waiting for it to exit.

        Args:
            executable_path: Path to the editor binary.
            arguments: Remote-command argument string.

        Returns:
            The started process. Output is not captured.

        Raises:
            NoInstallationSelectedError: If executable_path is empty.
            LaunchFailedError: If the process could not be started.
        """
        if not executable_path:
            raise NoInstallationSelectedError(
                "No Vim installation selected",
                hint="Choose a Vim installation before opening files",
            )

        try:
            cmd = build_command(executable_path, arguments)
        except ValueError as e:
            raise LaunchFailedError(
                f"Could not parse editor arguments: {e}",
                hint="Check the extra commands preference for unbalanced quotes",
            ) from e

        try:
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                start_new_session=True,
            )
        except FileNotFoundError as e:
            raise LaunchFailedError(
                f"Editor '{executable_path}' not found",
                hint="Select an existing Vim installation",
            ) from e
        except PermissionError as e:
            raise LaunchFailedError(
                f"Editor '{executable_path}' is not executable",
                hint="Check the file permissions of the selected installation",
            ) from e
        except OSError as e:
            raise LaunchFailedError(f"Failed to start editor: {e}") from e

        logger.debug("Started editor process %s", process.pid)
        return process
