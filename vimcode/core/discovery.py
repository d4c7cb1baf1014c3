"""Discovery of Vim installations on the local machine.

Combines a fixed list of well-known install locations with a scan of the
directories listed in PATH. The seed list is returned as-is; the host is
expected to drop entries that do not exist on disk.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from vimcode.domain.entities import Installation

logger = logging.getLogger(__name__)

VIM_NAME = "Vim"
MACVIM_NAME = "MacVim"

# Probed in this order; the first hit wins for a directory.
VIM_EXECUTABLES = (
    (VIM_NAME, "gvim.exe"),
    (MACVIM_NAME, "mvim"),
)

SEED_INSTALLATIONS = (
    # Installed with brew
    Installation(name=MACVIM_NAME, path="/usr/local/bin/mvim"),
    # Linux
    Installation(name=VIM_NAME, path="/usr/share/vim/gvim"),
)


def find_vim_in_folder(folder: str) -> Installation | None:
    """Probe a single directory for a Vim executable.

    Args:
        folder: Directory taken from the search path.

    Returns:
        Installation for the first matching executable, or None.
    """
    if not folder:
        return None

    for name, executable in VIM_EXECUTABLES:
        path = os.path.join(folder, executable)
        # isfile() reports False for missing or unreadable entries
        if os.path.isfile(path):
            return Installation(name=name, path=path)
    return None


def discover(
    environ: Mapping[str, str] | None = None, pathsep: str = os.pathsep
) -> list[Installation]:
    """Enumerate candidate Vim installations.

    Folders are not limited to ones named "vim" so that scoop and
    chocolatey installs are found too.

    Args:
        environ: Environment to read PATH from (defaults to os.environ).
        pathsep: Separator used to split PATH.

    Returns:
        Seed installations followed by PATH matches in PATH order.
        No deduplication is performed.
    """
    if environ is None:
        environ = os.environ

    installations = list(SEED_INSTALLATIONS)

    search_path = environ.get("PATH", "")
    if not search_path:
        logger.debug("PATH is unset, skipping search-path scan")
        return installations

    for folder in search_path.split(pathsep):
        found = find_vim_in_folder(folder)
        if found is not None:
            installations.append(found)

    logger.debug("Discovered %d candidate installation(s)", len(installations))
    return installations


def filter_existing(installations: Iterable[Installation]) -> list[Installation]:
    """Drop installations whose path does not exist on disk."""
    return [install for install in installations if Path(install.path).exists()]
