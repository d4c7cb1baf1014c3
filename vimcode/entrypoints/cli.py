"""vimcode CLI entrypoint.

Command-line host for the Vim external editor integration: lists Vim
installations, opens files in a Vim server and manages preferences.
"""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path

import click

from vimcode.core.discovery import discover, filter_existing
from vimcode.core.errors import VimcodeCliError
from vimcode.core.external_editor import VimExternalEditor
from vimcode.core.invocation import build_arguments
from vimcode.core.preferences import VimPreferences
from vimcode.domain.config import BOOL_KEYS, PREFERENCE_KEYS
from vimcode.ports.editor import EditorError, NoInstallationSelectedError
from vimcode.version import __version__

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    Converts editor errors into VimcodeCliError so their hint is shown, and
    wraps anything unexpected with a generic hint. Click exceptions are
    re-raised untouched.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except click.ClickException:
                raise
            except NoInstallationSelectedError as e:
                raise VimcodeCliError(
                    e.message,
                    hint="Pass --editor or set VIMCODE_EDITOR to a Vim binary",
                ) from e
            except EditorError as e:
                raise VimcodeCliError(e.message, hint=e.hint) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj and ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise VimcodeCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _load_settings_store():
    """Open the user settings store."""
    from vimcode.adapters.settings import TomlSettingsStore

    return TomlSettingsStore()


def _create_editor(
    project_root: Path | None,
    executable_path: str | None = None,
) -> VimExternalEditor:
    """Create the editor adapter with the CLI's settings and launcher.

    Args:
        project_root: Project directory, defaults to the current directory.
        executable_path: Vim binary to launch.

    Returns:
        Configured VimExternalEditor.
    """
    from vimcode.adapters.editor import SubprocessLauncher

    return VimExternalEditor(
        settings=_load_settings_store(),
        launcher=SubprocessLauncher(),
        project_root=project_root or Path.cwd(),
        executable_path=executable_path,
        # Listing installations is handled by the installations command
        installations=(),
    )


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise VimcodeCliError(
        f"Invalid boolean value '{value}'",
        hint="Use one of: true, false, yes, no, on, off, 1, 0",
    )


_position_options = [
    click.option(
        "--line",
        "-l",
        type=int,
        default=0,
        show_default=True,
        help="Line to jump to (1-based, 0 lets Vim restore the last position).",
    ),
    click.option(
        "--column",
        "-c",
        type=int,
        default=-1,
        show_default=True,
        help="Column to jump to (negative keeps the current column).",
    ),
    click.option(
        "--project-root",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Project directory added to Vim's 'path' (default: current directory).",
    ),
]


def _show_warnings(prefs: VimPreferences) -> None:
    """Print preference notices to stderr."""
    for warning in prefs.warnings():
        fg = "yellow" if warning.level == "warning" else None
        click.secho(f"{warning.level.capitalize()}: {warning.message}", fg=fg, err=True)


def position_options(func):
    for option in reversed(_position_options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="vimcode")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """vimcode - Open files from your IDE in a Vim server.

    Finds gVim/MacVim installations and sends remote open requests.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@cli.command()
@click.option(
    "--all", "-a", "show_all", is_flag=True, help="Include paths that do not exist."
)
@handle_cli_errors("installations")
def installations(show_all: bool) -> None:
    """List Vim installations found on this machine."""
    found = discover()
    if not show_all:
        found = filter_existing(found)

    if not found:
        click.echo("No Vim installations found", err=True)
        return

    for install in found:
        click.echo(f"{install.name:<8} {install.path}")


@cli.command()
@click.argument("file")
@position_options
@handle_cli_errors("args")
def args(file: str, line: int, column: int, project_root: Path | None) -> None:
    """Print the Vim arguments that would be used to open FILE."""
    editor = _create_editor(project_root)
    click.echo(build_arguments(editor.build_request(file, line, column)))


@cli.command(name="open")
@click.argument("file")
@position_options
@click.option(
    "--editor",
    "-e",
    "editor_path",
    envvar="VIMCODE_EDITOR",
    default=None,
    help="Vim binary to launch (or set VIMCODE_EDITOR).",
)
@handle_cli_errors("open")
def open_file(
    file: str,
    line: int,
    column: int,
    project_root: Path | None,
    editor_path: str | None,
) -> None:
    """Open FILE in the Vim server at the given position.

    Exits with status 1 if FILE does not match the configured extensions.
    """
    editor = _create_editor(project_root, executable_path=editor_path)
    if not editor.open_request(file, line, column):
        click.echo(
            f"Not handled: {file} does not match the configured extensions",
            err=True,
        )
        sys.exit(1)
    click.echo(f"Opened {file} in {editor.executable_path}")


@cli.group()
def config() -> None:
    """Manage vimcode preferences.

    Preferences are stored in a TOML file in the user config directory.
    """
    pass


@config.command(name="show")
@handle_cli_errors("config show")
def config_show() -> None:
    """Show the settings file location and current preferences."""
    store = _load_settings_store()
    prefs = VimPreferences(store)

    path = store.path
    status = "exists" if path.exists() else "not created"
    color = "green" if path.exists() else "yellow"
    click.echo(f"Settings file: {path}")
    click.echo(f"  Status: {click.style(status, fg=color)}")
    click.echo("  [preferences]")
    click.echo(f"    servername = {prefs.server_name}")
    click.echo(f"    setpath = {str(prefs.should_set_path).lower()}")
    click.echo(f"    extracommands = {prefs.extra_commands}")
    click.echo(f"    codeassets = {prefs.code_assets}")

    _show_warnings(prefs)


@config.command(name="set")
@click.argument("key", type=click.Choice(sorted(PREFERENCE_KEYS)))
@click.argument("value")
@handle_cli_errors("config set")
def config_set(key: str, value: str) -> None:
    """Set a preference.

    KEY is one of servername, setpath, extracommands or codeassets.
    """
    store = _load_settings_store()
    prefs = VimPreferences(store)
    full_key = PREFERENCE_KEYS[key]

    if full_key in BOOL_KEYS:
        prefs.should_set_path = _parse_bool(value)
    elif key == "servername":
        prefs.server_name = value
    elif key == "extracommands":
        prefs.extra_commands = value
    else:
        prefs.code_assets = value

    click.echo(f"Set {key}")
    _show_warnings(prefs)


@config.command(name="reset-extensions")
@handle_cli_errors("config reset-extensions")
def config_reset_extensions() -> None:
    """Restore the default list of file extensions opened in Vim."""
    prefs = VimPreferences(_load_settings_store())
    prefs.reset_code_assets()
    click.echo(f"File extensions reset to {prefs.code_assets}")


@config.command(name="path")
def config_path() -> None:
    """Print the settings file path for use in scripts."""
    from vimcode.shared.config_io import get_global_settings_path

    click.echo(get_global_settings_path())


def main() -> int:
    """Main entrypoint for the CLI."""
    try:
        cli(obj={})
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
