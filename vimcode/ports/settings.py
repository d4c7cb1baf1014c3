"""Settings store port.

The host owns preference persistence. This core only depends on a small
key/value capability with default fallback.
"""

from typing import Protocol


class SettingsStore(Protocol):
    """Protocol for a string/bool key-value preference store."""

    def get_string(self, key: str, default: str = "") -> str:
        """Return the stored string for key, or default if unset."""
        ...

    def set_string(self, key: str, value: str) -> None:
        """Store a string value under key."""
        ...

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return the stored bool for key, or default if unset."""
        ...

    def set_bool(self, key: str, value: bool) -> None:
        """Store a bool value under key."""
        ...

    def has_key(self, key: str) -> bool:
        """Return True if a value is stored under key."""
        ...

    def delete_key(self, key: str) -> None:
        """Remove key so that reads fall back to their default.

        Deleting a missing key is a no-op.
        """
        ...
