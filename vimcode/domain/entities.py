"""Core domain entities for vimcode.

These are immutable value carriers passed between discovery, the
dispatcher and the host.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Installation:
    """One discoverable editor binary.

    Attributes:
        name: Display name shown by the host (e.g., "MacVim").
        path: Absolute path to the binary.
    """

    name: str
    path: str


@dataclass(frozen=True)
class InvocationRequest:
    """A single open-file request, resolved against current settings.

    Attributes:
        file_path: File to open, embedded in the command in double quotes.
        line: 1-based line. Zero or negative means unknown.
        column: Column. Negative means unknown.
        server_name: Vim server name passed to --servername.
        set_path: Whether to append the project's Assets tree to 'path'.
        extra_commands: Raw extra commands placed before the file name.
        project_root: Project directory used for the 'path' clause.
    """

    file_path: str
    line: int
    column: int
    server_name: str
    set_path: bool
    extra_commands: str
    project_root: str
