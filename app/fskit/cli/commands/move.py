"""Move command implementation."""

from pathlib import Path
from typing import Annotated

import typer

from fskit.cli.types import fs_errors
from fskit.filesystem import rename


def move_command(
    src: Annotated[Path, typer.Argument(help="Existing path.")],
    dst: Annotated[Path, typer.Argument(help="New path.")],
) -> None:
    """Rename (move) a file or directory.

    An existing destination file is replaced. Moves across filesystems
    are not supported.
    """
    with fs_errors():
        rename(src, dst)
