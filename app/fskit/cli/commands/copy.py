"""Copy command implementation.

Copies a file or a directory tree, preserving permission bits.
"""

from pathlib import Path
from typing import Annotated

import typer

from fskit.cli.types import fs_errors, is_quiet
from fskit.filesystem import copy, is_dir
from fskit.utils.formatting import print_success


def copy_command(
    ctx: typer.Context,
    src: Annotated[Path, typer.Argument(help="Source file or directory.")],
    dst: Annotated[Path, typer.Argument(help="Destination path.")],
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", "-f", help="Replace existing destination files."),
    ] = False,
) -> None:
    """Copy a file or directory tree.

    Existing destination files are kept unless --overwrite is given.
    Symbolic links are followed and copied as their targets.
    """
    with fs_errors():
        kind = "directory" if is_dir(src) else "file"
        copy(src, dst, overwrite=overwrite)

    if not is_quiet(ctx):
        print_success(f"Copied {kind} {src} -> {dst}")
