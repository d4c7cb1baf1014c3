"""TOML-backed settings store.

Persists vimcode preferences to the user settings file. Every write is
flushed to disk immediately.
"""

import logging
from pathlib import Path

from vimcode.adapters.settings.memory import InMemorySettingsStore
from vimcode.shared.config_io import (
    get_global_settings_path,
    load_settings_data,
    save_settings_data,
)

logger = logging.getLogger(__name__)


class TomlSettingsStore(InMemorySettingsStore):
    """SettingsStore persisted to a TOML file.

    A missing file behaves like an empty store. A malformed file is
    ignored with a warning so that built-in defaults apply; it is only
    overwritten on the next write.
    """

    def __init__(self, path: Path | None = None) -> None:
        super().__init__()
        self._path = path or get_global_settings_path()

        if self._path.exists():
            try:
                self._values = load_settings_data(self._path)
                logger.debug("Loaded settings from %s", self._path)
            except (FileNotFoundError, ValueError) as e:
                logger.warning(
                    "Failed to parse settings at %s: %s. Using defaults.",
                    self._path,
                    e,
                )

    @property
    def path(self) -> Path:
        return self._path

    def set_string(self, key: str, value: str) -> None:
        super().set_string(key, value)
        self._save()

    def set_bool(self, key: str, value: bool) -> None:
        super().set_bool(key, value)
        self._save()

    def delete_key(self, key: str) -> None:
        if not self.has_key(key):
            return
        super().delete_key(key)
        self._save()

    def _save(self) -> None:
        save_settings_data(self.as_dict(), self._path)
