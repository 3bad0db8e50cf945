"""Ensure commands.

Create directories or empty files only when nothing exists at the path.
"""

from pathlib import Path
from typing import Annotated

import typer

from fskit.cli.types import fs_errors, get_settings_from_context, is_quiet, resolve_mode
from fskit.core.settings import format_mode
from fskit.filesystem import ensure_dir, ensure_file, exists
from fskit.utils.formatting import print_info, print_success

app = typer.Typer(
    help="Create directories or files if they do not exist.",
    no_args_is_help=True,
)

ModeOption = Annotated[
    str | None,
    typer.Option(
        "--mode",
        "-m",
        help="Octal permission bits (default from settings).",
    ),
]


@app.command("dir")
def ensure_dir_command(
    ctx: typer.Context,
    paths: Annotated[list[Path], typer.Argument(help="Directories to ensure.")],
    mode: ModeOption = None,
) -> None:
    """Ensure directories exist, creating missing parents.

    A path that already exists is left untouched, even if it is a file.
    """
    perm = resolve_mode(mode, get_settings_from_context(ctx).dir_mode)
    quiet = is_quiet(ctx)

    with fs_errors():
        for path in paths:
            if exists(path):
                if not quiet:
                    print_info(f"Exists: {path}")
                continue
            ensure_dir(path, perm)
            if not quiet:
                print_success(f"Created directory {path} ({format_mode(perm)})")


@app.command("file")
def ensure_file_command(
    ctx: typer.Context,
    paths: Annotated[list[Path], typer.Argument(help="Files to ensure.")],
    mode: ModeOption = None,
) -> None:
    """Ensure files exist, creating empty ones where missing.

    The parent directory must already exist.
    """
    perm = resolve_mode(mode, get_settings_from_context(ctx).file_mode)
    quiet = is_quiet(ctx)

    with fs_errors():
        for path in paths:
            if exists(path):
                if not quiet:
                    print_info(f"Exists: {path}")
                continue
            ensure_file(path, perm)
            if not quiet:
                print_success(f"Created file {path} ({format_mode(perm)})")
