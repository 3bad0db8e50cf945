"""Tree command implementation.

Lists a directory tree in lexical order without following symbolic links.
"""

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from fskit.cli.types import fs_errors
from fskit.filesystem import DirEntry, WalkAction, walk_dir
from fskit.utils.formatting import console, print_warning


def tree_command(
    root: Annotated[Path, typer.Argument(help="Directory to list.")] = Path("."),
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-x", help="Entry name to skip (repeatable)."),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=1, help="Stop after this many entries."),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Abort on the first unreadable entry."),
    ] = False,
) -> None:
    """List ROOT and every entry below it in lexical order.

    Excluded directories are not descended into. Unreadable entries are
    reported as warnings unless --strict is given.
    """
    root_str = str(root)
    excluded = set(exclude or [])
    shown = 0

    def visit(path: str, entry: DirEntry | None, error: OSError | None) -> WalkAction | None:
        nonlocal shown
        if error is not None:
            if strict or entry is None:
                raise error
            print_warning(f"Cannot read {path}: {error.strerror or error}")
            return None
        if entry is None:
            return None

        if path != root_str and entry.name in excluded:
            return WalkAction.SKIP_DIR if entry.is_dir else None

        console.print(_format_entry(root_str, path, entry), soft_wrap=True)
        shown += 1
        if limit is not None and shown >= limit:
            return WalkAction.SKIP_ALL
        return None

    with fs_errors():
        walk_dir(root_str, visit)


def _format_entry(root: str, path: str, entry: DirEntry) -> str:
    """Render one entry indented by its depth below ``root``."""
    if path == root:
        indent, name = "", escape(path)
    else:
        indent = "  " * (os.path.relpath(path, root).count(os.sep) + 1)
        name = escape(entry.name)
    if entry.is_symlink:
        try:
            target = escape(os.readlink(path))
        except OSError:
            target = "?"
        return f"{indent}[entry.symlink]{name}[/] -> {target}"
    if entry.is_dir:
        return f"{indent}[entry.directory]{name}/[/]"
    return f"{indent}[entry.file]{name}[/]"
