"""Settings I/O utilities for reading and writing the TOML settings file.

Preferences are stored flat under a single [preferences] table, keyed by
the vimcode preference keys.
"""

import os
import platform
import tomllib  # Built-in Python 3.11+
from pathlib import Path
from typing import Any

import tomli_w

PREFERENCES_TABLE = "preferences"


def get_global_settings_path() -> Path:
    """Get the path to the user settings file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/vimcode/settings.toml or ~/.config/vimcode/settings.toml
    - Windows: %APPDATA%/vimcode/settings.toml

    Returns:
        Path to the settings file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "vimcode" / "settings.toml"
        # Fallback to home directory
        return Path.home() / ".config" / "vimcode" / "settings.toml"
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_config:
            return Path(xdg_config) / "vimcode" / "settings.toml"
        return Path.home() / ".config" / "vimcode" / "settings.toml"


def load_settings_data(path: Path) -> dict[str, Any]:
    """Load stored preferences from a settings file.

    Args:
        path: Path to settings.toml

    Returns:
        Dictionary of preference key to value (empty if the table is absent)

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        ValueError: If the file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in settings file: {e}") from e

    preferences = data.get(PREFERENCES_TABLE, {})
    if not isinstance(preferences, dict):
        raise ValueError(f"[{PREFERENCES_TABLE}] must be a table in {path}")
    return preferences


def save_settings_data(values: dict[str, Any], path: Path) -> None:
    """Write preferences to a settings file, replacing its contents.

    Args:
        values: Preference key to value
        path: Destination path for settings.toml
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("wb") as f:
        tomli_w.dump({PREFERENCES_TABLE: values}, f)
