"""Decides which files are routed to Vim."""

from collections.abc import Sequence


def parse_extension_list(raw: str) -> list[str]:
    """Split a comma-separated extension setting.

    Blank segments are dropped, so an empty setting yields an empty list
    (which matches every file).
    """
    return [ext.strip() for ext in raw.split(",") if ext.strip()]


def is_managed_asset(path: str, extensions: Sequence[str]) -> bool:
    """Check whether a file should be opened by this editor.

    Args:
        path: File path requested by the host.
        extensions: Case-sensitive suffixes. Empty means match everything.

    Returns:
        True if the path ends with any configured extension.
    """
    if not extensions:
        return True
    return any(path.endswith(ext) for ext in extensions)
