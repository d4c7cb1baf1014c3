"""Tests for the VimExternalEditor host adapter."""

from pathlib import Path
from unittest.mock import patch

import pytest

from vimcode.adapters.settings import InMemorySettingsStore
from vimcode.core.external_editor import VimExternalEditor
from vimcode.domain.config import CODE_ASSETS_KEY, SET_PATH_KEY
from vimcode.domain.entities import Installation
from vimcode.ports.editor import LaunchFailedError, NoInstallationSelectedError

MVIM = "/usr/local/bin/mvim"


@pytest.fixture
def installs() -> list[Installation]:
    return [
        Installation("MacVim", MVIM),
        Installation("Vim", "/opt/vim/gvim.exe"),
        Installation("Vim (dup)", MVIM),
    ]


@pytest.fixture
def editor(settings, launcher, installs) -> VimExternalEditor:
    """Editor with an in-memory store and recording launcher."""
    return VimExternalEditor(
        settings=settings,
        launcher=launcher,
        project_root="/projects/game",
        executable_path=MVIM,
        installations=installs,
    )


class TestOpenRequest:
    """Tests for dispatching open requests."""

    def test_unmanaged_file_is_not_handled(self, editor, launcher) -> None:
        """Test that unmanaged files return False without launching."""
        assert editor.open_request("Textures/hero.png", 1, 0) is False
        assert launcher.calls == []

    def test_managed_file_is_launched(self, editor, launcher) -> None:
        """Test that a code asset launches Vim with the built arguments."""
        assert editor.open_request("Assets/Player.cs", 12, -1) is True

        assert launcher.calls == [
            (
                MVIM,
                '--servername Unity --remote-silent +"call cursor(12,0)" '
                '+"set path+=/projects/game/Assets/**"  "Assets/Player.cs"',
            )
        ]

    def test_settings_read_at_dispatch_time(
        self, editor, launcher, settings: InMemorySettingsStore
    ) -> None:
        """Test that preference changes apply to the next request."""
        settings.set_bool(SET_PATH_KEY, False)

        editor.open_request("a.cs", 10, -1)

        assert launcher.calls[-1][1] == (
            '--servername Unity --remote-silent +"call cursor(10,0)"  "a.cs"'
        )

    def test_empty_extension_list_handles_everything(
        self, editor, launcher, settings: InMemorySettingsStore
    ) -> None:
        """Test that clearing the extension list routes all files to Vim."""
        settings.set_string(CODE_ASSETS_KEY, "")

        assert editor.open_request("Textures/hero.png", 1, 0) is True
        assert len(launcher.calls) == 1

    def test_launch_failure_propagates(
        self, settings, failing_launcher, installs
    ) -> None:
        """Test that LaunchFailedError reaches the caller."""
        launcher = failing_launcher(LaunchFailedError("Editor not found"))
        editor = VimExternalEditor(
            settings, launcher, "/p", executable_path=MVIM, installations=installs
        )

        with pytest.raises(LaunchFailedError, match="Editor not found"):
            editor.open_request("a.cs", 1, 1)

    def test_no_installation_selected(self, settings, launcher) -> None:
        """Test that dispatch without an editor path raises."""
        editor = VimExternalEditor(settings, launcher, "/p", installations=[])

        with pytest.raises(NoInstallationSelectedError):
            editor.open_request("a.cs", 1, 1)
        assert launcher.calls == []

    def test_no_installation_still_reports_unmanaged(
        self, settings, launcher
    ) -> None:
        """Test that the extension check comes before the editor check."""
        editor = VimExternalEditor(settings, launcher, "/p", installations=[])

        assert editor.open_request("hero.png", 1, 1) is False


class TestInstallations:
    """Tests for installation lookup and initialization."""

    def test_initialize_sets_executable(self, settings, launcher) -> None:
        """Test that initialize stores the host-selected path."""
        editor = VimExternalEditor(settings, launcher, "/p", installations=[])

        editor.initialize("/usr/bin/gvim")
        editor.open_request("a.cs", 1, 1)

        assert editor.executable_path == "/usr/bin/gvim"
        assert launcher.calls[0][0] == "/usr/bin/gvim"

    def test_lookup_returns_first_match(self, editor, installs) -> None:
        """Test that the first installation with the path is returned."""
        assert editor.try_get_installation_for_path(MVIM) is installs[0]

    def test_lookup_unknown_path(self, editor) -> None:
        """Test that unknown paths return None."""
        assert editor.try_get_installation_for_path("/usr/bin/nano") is None

    def test_installations_discovered_when_omitted(self, settings, launcher) -> None:
        """Test that discovery runs once at construction by default."""
        found = [Installation("MacVim", MVIM)]
        with patch(
            "vimcode.core.external_editor.discover", return_value=found
        ) as mock_discover:
            editor = VimExternalEditor(settings, launcher, Path("/p"))

        mock_discover.assert_called_once_with()
        assert editor.installations == tuple(found)

    def test_project_root_accepts_path(self, settings, launcher) -> None:
        """Test that a Path project root is embedded as a string."""
        editor = VimExternalEditor(
            settings, launcher, Path("/projects/game"), installations=[]
        )

        request = editor.build_request("a.cs", 1, 2)

        assert request.project_root == str(Path("/projects/game"))
        assert request.server_name == "Unity"
        assert request.set_path is True
