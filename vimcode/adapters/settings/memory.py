"""In-memory settings store.

Used by tests and by hosts that keep preferences in their own structures.
"""

from typing import Any


class InMemorySettingsStore:
    """SettingsStore backed by a plain dict."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def get_string(self, key: str, default: str = "") -> str:
        value = self._values.get(key)
        return value if isinstance(value, str) else default

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = value

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._values.get(key)
        return value if isinstance(value, bool) else default

    def set_bool(self, key: str, value: bool) -> None:
        self._values[key] = value

    def has_key(self, key: str) -> bool:
        return key in self._values

    def delete_key(self, key: str) -> None:
        self._values.pop(key, None)

    def as_dict(self) -> dict[str, Any]:
        """Return a copy of the stored values."""
        return dict(self._values)
