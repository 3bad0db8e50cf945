"""Remove command implementation."""

from pathlib import Path
from typing import Annotated

import typer

from fskit.cli.types import fs_errors
from fskit.filesystem import remove, remove_all


def remove_command(
    paths: Annotated[list[Path], typer.Argument(help="Paths to remove.")],
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            help="Remove directories and their contents; missing paths are ignored.",
        ),
    ] = False,
) -> None:
    """Remove files or empty directories.

    Without --recursive a non-empty directory is an error. Processing
    stops at the first failure.
    """
    with fs_errors():
        for path in paths:
            if recursive:
                remove_all(path)
            else:
                remove(path)
