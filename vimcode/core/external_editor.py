"""External Vim editor adapter for the host.

The host constructs a VimExternalEditor with its settings store and a
launcher, and registers it in its own editor registry. Nothing is
registered implicitly at import time.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from vimcode.core.asset_filter import is_managed_asset
from vimcode.core.discovery import discover
from vimcode.core.invocation import build_arguments
from vimcode.core.preferences import VimPreferences
from vimcode.domain.entities import Installation, InvocationRequest
from vimcode.ports.editor import Launcher, NoInstallationSelectedError
from vimcode.ports.settings import SettingsStore

logger = logging.getLogger(__name__)


class VimExternalEditor:
    """Opens files in a running Vim server on behalf of the host.

    Args:
        settings: Host-owned preference store, read at dispatch time.
        launcher: Starts the editor process without waiting for it.
        project_root: Project directory used for the 'path' clause.
        executable_path: Editor binary chosen by the host, if known.
        installations: Pre-computed installations. Discovered when omitted.
    """

    def __init__(
        self,
        settings: SettingsStore,
        launcher: Launcher,
        project_root: str | Path,
        executable_path: str | None = None,
        installations: Sequence[Installation] | None = None,
    ) -> None:
        self._preferences = VimPreferences(settings)
        self._launcher = launcher
        self._project_root = str(project_root)
        self._executable_path = executable_path
        if installations is None:
            installations = discover()
        self._installations = tuple(installations)

    @property
    def installations(self) -> tuple[Installation, ...]:
        return self._installations

    @property
    def preferences(self) -> VimPreferences:
        return self._preferences

    @property
    def executable_path(self) -> str | None:
        return self._executable_path

    def initialize(self, executable_path: str) -> None:
        """Use the editor binary the host selected."""
        logger.debug("Using editor at %s", executable_path)
        self._executable_path = executable_path

    def try_get_installation_for_path(self, editor_path: str) -> Installation | None:
        """Return the first known installation with exactly this path.

        The host calls this to ask whether the stored editor path belongs
        to this adapter.
        """
        for install in self._installations:
            if install.path == editor_path:
                return install
        return None

    def is_code_asset(self, file_path: str) -> bool:
        return is_managed_asset(file_path, self._preferences.code_asset_list)

    def build_request(self, file_path: str, line: int, column: int) -> InvocationRequest:
        """Resolve an open request against the current preferences."""
        return InvocationRequest(
            file_path=file_path,
            line=line,
            column=column,
            server_name=self._preferences.server_name,
            set_path=self._preferences.should_set_path,
            extra_commands=self._preferences.extra_commands,
            project_root=self._project_root,
        )

    def open_request(self, file_path: str, line: int, column: int) -> bool:
        """Open a file at a position in Vim.

        Args:
            file_path: File to open.
            line: 1-based line, or 0/negative if unknown.
            column: Column, or negative if unknown.

        Returns:
            False if the file is not handled by this editor, True once the
            editor process has been started.

        Raises:
            NoInstallationSelectedError: If no editor binary is configured.
            LaunchFailedError: If the editor process could not be started.
        """
        if not self.is_code_asset(file_path):
            logger.debug("Not a code asset, leaving %s to the host", file_path)
            return False

        if not self._executable_path:
            raise NoInstallationSelectedError(
                "No Vim installation selected",
                hint="Choose a Vim installation before opening files",
            )

        arguments = build_arguments(self.build_request(file_path, line, column))
        logger.debug("Launching %s %s", self._executable_path, arguments)
        # The process is not awaited: the first launch keeps running until
        # Vim exits.
        self._launcher.launch(self._executable_path, arguments)
        return True
