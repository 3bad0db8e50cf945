"""Resolve command implementation.

Prints the absolute form of a relative or home-relative path.
"""

from typing import Annotated

import typer

from fskit.cli.types import fs_errors
from fskit.filesystem import resolve


def resolve_command(
    path: Annotated[str, typer.Argument(help="Path to resolve.")],
    base: Annotated[
        str,
        typer.Option(
            "--base",
            "-b",
            help="Directory to resolve against (default: working directory).",
        ),
    ] = "",
) -> None:
    """Resolve a path to an absolute path.

    Examples:
        fskit resolve ~/notes.txt
        fskit resolve ./build --base /srv/app
    """
    with fs_errors():
        typer.echo(resolve(path, base))
