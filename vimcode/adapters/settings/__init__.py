"""Settings store adapters."""

from vimcode.adapters.settings.memory import InMemorySettingsStore
from vimcode.adapters.settings.toml_settings_store import TomlSettingsStore

__all__ = ["InMemorySettingsStore", "TomlSettingsStore"]
