"""Typed access to vimcode preferences.

Wraps the host's settings store with the vimcode keys and defaults. The
host's preferences panel reads and writes through this class; the
dispatcher only reads.
"""

import logging
from dataclasses import dataclass

from vimcode.core.asset_filter import parse_extension_list
from vimcode.domain.config import (
    CODE_ASSETS_KEY,
    DEFAULT_CODE_ASSETS,
    DEFAULT_EXTRA_COMMANDS,
    DEFAULT_SERVER_NAME,
    DEFAULT_SET_PATH,
    EXTRA_COMMANDS_KEY,
    SERVER_NAME_KEY,
    SET_PATH_KEY,
)
from vimcode.ports.settings import SettingsStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreferenceWarning:
    """A message the preferences surface should show the user.

    Attributes:
        level: "info" or "warning".
        message: Text to display.
    """

    level: str
    message: str


ALL_FILES_NOTICE = PreferenceWarning("info", "All files will be opened in vim.")
SET_PATH_CONFLICT_WARNING = PreferenceWarning(
    "warning",
    "Set 'path' and extra commands may not play well together. "
    "If files aren't opened correctly, try removing extra commands.",
)


class VimPreferences:
    """Preference accessors backed by a SettingsStore."""

    def __init__(self, store: SettingsStore) -> None:
        self._store = store

    @property
    def server_name(self) -> str:
        """Name passed to --servername, shown in the Vim window title."""
        return self._store.get_string(SERVER_NAME_KEY, DEFAULT_SERVER_NAME)

    @server_name.setter
    def server_name(self, value: str) -> None:
        if value != self.server_name:
            self._store.set_string(SERVER_NAME_KEY, value)

    @property
    def should_set_path(self) -> bool:
        """Whether {project}/Assets/** is added to Vim's 'path'."""
        return self._store.get_bool(SET_PATH_KEY, DEFAULT_SET_PATH)

    @should_set_path.setter
    def should_set_path(self, value: bool) -> None:
        if value != self.should_set_path:
            self._store.set_bool(SET_PATH_KEY, value)

    @property
    def extra_commands(self) -> str:
        """Raw commands placed before the file name, e.g. +"runtime unity.vim"."""
        return self._store.get_string(EXTRA_COMMANDS_KEY, DEFAULT_EXTRA_COMMANDS)

    @extra_commands.setter
    def extra_commands(self, value: str) -> None:
        if value != self.extra_commands:
            self._store.set_string(EXTRA_COMMANDS_KEY, value)

    @property
    def code_assets(self) -> str:
        """Comma-separated extensions opened in Vim."""
        return self._store.get_string(CODE_ASSETS_KEY, DEFAULT_CODE_ASSETS)

    @code_assets.setter
    def code_assets(self, value: str) -> None:
        value = value.strip()
        if value != self.code_assets:
            self._store.set_string(CODE_ASSETS_KEY, value)

    @property
    def code_asset_list(self) -> list[str]:
        return parse_extension_list(self.code_assets)

    def reset_code_assets(self) -> None:
        """Forget the stored extension list so the default applies again."""
        logger.debug("Resetting %s to default", CODE_ASSETS_KEY)
        self._store.delete_key(CODE_ASSETS_KEY)

    def warnings(self) -> list[PreferenceWarning]:
        """Return notices for the current combination of settings."""
        notices = []
        if not self.code_asset_list:
            notices.append(ALL_FILES_NOTICE)
        # Vim only accepts one extra command after set path
        if self.should_set_path and self.extra_commands:
            notices.append(SET_PATH_CONFLICT_WARNING)
        return notices
