"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from fskit import __version__
from fskit.cli.commands import (
    config,
    copy,
    ensure,
    link,
    move,
    remove,
    resolve,
    stat,
    text,
    tree,
)
from fskit.core.settings import SettingsError, get_settings
from fskit.utils.formatting import err_console, print_error

# Create main Typer app
app = typer.Typer(
    name="fskit",
    help="Convenience commands over host filesystem primitives.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fskit version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route fskit log records to stderr through Rich when verbose."""
    logger = logging.getLogger("fskit")
    if not verbose:
        return
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (default: ~/.config/fskit/settings.toml).",
        ),
    ] = None,
) -> None:
    """fskit - convenience commands over host filesystem primitives.

    Copy, ensure, inspect, walk, read and write files with predictable
    permission handling.
    """
    _configure_logging(verbose)

    try:
        settings = get_settings(config_path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["config_path"] = config_path


# Register single commands
app.command(name="resolve")(resolve.resolve_command)
app.command(name="copy")(copy.copy_command)
app.command(name="stat")(stat.stat_command)
app.command(name="tree")(tree.tree_command)
app.command(name="remove")(remove.remove_command)
app.command(name="move")(move.move_command)
app.command(name="link")(link.link_command)

# Register command groups
app.add_typer(ensure.app, name="ensure")
app.add_typer(text.app, name="text")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
