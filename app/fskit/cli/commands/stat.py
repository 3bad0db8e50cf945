"""Stat command implementation.

Shows a metadata snapshot for a path.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from fskit.cli.types import OutputFormat, fs_errors
from fskit.core.settings import format_mode
from fskit.filesystem import FileInfo, lstat, stat
from fskit.utils.formatting import console, create_info_table


def stat_command(
    path: Annotated[Path, typer.Argument(help="Path to inspect.")],
    no_follow: Annotated[
        bool,
        typer.Option("--no-follow", help="Describe a symbolic link itself."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show size, type, mode and modification time of a path."""
    with fs_errors():
        info = lstat(path) if no_follow else stat(path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(_info_to_dict(str(path), info)))
        return

    console.print(create_info_table(str(path), info))


def _info_to_dict(path: str, info: FileInfo) -> dict[str, object]:
    """Convert a FileInfo into a JSON-serializable dictionary."""
    return {
        "path": path,
        "name": info.name,
        "size": info.size,
        "mode": format_mode(info.perm),
        "mtime": info.mtime.isoformat(),
        "is_dir": info.is_dir,
        "is_symlink": info.is_symlink,
    }
