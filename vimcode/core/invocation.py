"""Remote-command argument construction for Vim.

Builds the exact argument string understood by Vim's --remote-silent
facility. Token order and quoting are part of the protocol and must not
change.
"""

from vimcode.domain.entities import InvocationRequest


def clamp_position(line: int, column: int) -> tuple[int, int]:
    """Clamp line and column to non-negative values.

    The host passes -1 when it has no column. cursor() aborts on negative
    values but keeps the current column on 0. Line 0 is kept as-is so that
    Vim can return to the previously visited line (e.g. vim-lastplace).

    Returns:
        Tuple of (line, column).
    """
    return max(line, 0), max(column, 0)


def cursor_command(line: int, column: int) -> str:
    """Return the +"call cursor(...)" sub-command for a position."""
    line, column = clamp_position(line, column)
    return f'+"call cursor({line},{column})"'


def set_path_command(project_root: str) -> str:
    """Return the sub-command adding the project's Assets tree to 'path'."""
    return f'+"set path+={project_root}/Assets/**"'


def build_arguments(request: InvocationRequest) -> str:
    """Build the argument string for a remote open request.

    Format:
        --servername <name> --remote-silent +"call cursor(<l>,<c>)"
        [+"set path+=<root>/Assets/**"] <extra> "<file>"

    Extra commands are inserted verbatim. The file path is only wrapped in
    double quotes; paths containing a double quote are not supported.

    Args:
        request: Resolved invocation request.

    Returns:
        Argument string to hand to the editor executable.
    """
    parts = [
        f"--servername {request.server_name}",
        "--remote-silent",
        cursor_command(request.line, request.column),
    ]
    if request.set_path:
        parts.append(set_path_command(request.project_root))
    parts.append(request.extra_commands)
    parts.append(f'"{request.file_path}"')
    return " ".join(parts)
