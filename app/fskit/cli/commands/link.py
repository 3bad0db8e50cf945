"""Link command implementation.

Creates hard links or symbolic links.
"""

from pathlib import Path
from typing import Annotated

import typer

from fskit.cli.types import fs_errors
from fskit.filesystem import link, symlink


def link_command(
    target: Annotated[str, typer.Argument(help="Existing file (or symlink target).")],
    link_path: Annotated[Path, typer.Argument(help="Link to create.")],
    symbolic: Annotated[
        bool,
        typer.Option("--symbolic", "-s", help="Create a symbolic link instead of a hard link."),
    ] = False,
) -> None:
    """Create a hard link, or a symbolic link with --symbolic.

    Symbolic link targets are stored verbatim and need not exist.
    """
    with fs_errors():
        if symbolic:
            symlink(target, link_path)
        else:
            link(target, link_path)
