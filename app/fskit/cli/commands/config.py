"""Settings commands.

Show the effective settings or write a settings file with defaults.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from fskit.cli.types import get_settings_from_context
from fskit.core.paths import get_settings_path
from fskit.core.settings import DEFAULT_SETTINGS, SettingsError, format_mode, save_settings
from fskit.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize fskit settings.",
    no_args_is_help=True,
)


def _settings_path_from_context(ctx: typer.Context) -> Path:
    """Return the --config path given to the root command, or the default."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and isinstance(obj.get("config_path"), Path):
        return obj["config_path"]
    return get_settings_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective settings."""
    settings = get_settings_from_context(ctx)
    path = _settings_path_from_context(ctx)

    table = Table(title="fskit settings", show_header=True, header_style="bold_header")
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value", style="info")
    table.add_row("dir_mode", format_mode(settings.dir_mode))
    table.add_row("file_mode", format_mode(settings.file_mode))
    table.add_row("line_separator", repr(settings.line_separator))
    table.add_row("encoding", settings.encoding)
    console.print(table)

    source = str(path) if path.exists() else "built-in defaults"
    console.print(f"\n[dim]Source: {escape(source)}[/dim]")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file containing the defaults."""
    path = _settings_path_from_context(ctx)

    if path.exists() and not force:
        print_info(f"Settings file already exists: {path} (use --force to overwrite)")
        return

    try:
        saved = save_settings(DEFAULT_SETTINGS, path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
