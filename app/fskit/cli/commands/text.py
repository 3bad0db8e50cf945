"""Text file commands.

Read a file whole or line by line, and write lines with a chosen
separator.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from fskit.cli.types import fs_errors, get_settings_from_context, resolve_mode
from fskit.filesystem import read_file_lines, read_text_file, write_file_lines_sep
from fskit.utils.formatting import console, print_error

app = typer.Typer(
    help="Read and write whole text files.",
    no_args_is_help=True,
)

_SEPARATORS = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}


@app.command("cat")
def cat_command(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to print.")],
) -> None:
    """Print a file's contents exactly as stored."""
    encoding = get_settings_from_context(ctx).encoding
    with fs_errors():
        try:
            content = read_text_file(path, encoding)
        except UnicodeDecodeError as e:
            print_error(f"{path} is not valid {encoding}: {e.reason}")
            raise typer.Exit(code=1) from e
    typer.echo(content, nl=False)


@app.command("lines")
def lines_command(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to read.")],
    number: Annotated[
        bool,
        typer.Option("--number", "-n", help="Prefix each line with its number."),
    ] = False,
) -> None:
    """Print a file line by line with terminators normalized."""
    encoding = get_settings_from_context(ctx).encoding
    with fs_errors():
        try:
            lines = read_file_lines(path, encoding)
        except UnicodeDecodeError as e:
            print_error(f"{path} is not valid {encoding}: {e.reason}")
            raise typer.Exit(code=1) from e

    width = len(str(len(lines)))
    for index, line in enumerate(lines, start=1):
        if number:
            console.print(
                f"[muted]{index:>{width}}[/] {escape(line)}",
                highlight=False,
                soft_wrap=True,
            )
        else:
            typer.echo(line)


@app.command("write")
def write_command(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to write.")],
    lines: Annotated[list[str], typer.Argument(help="Lines to write.")],
    separator: Annotated[
        str | None,
        typer.Option(
            "--sep",
            help="Line ending: lf, crlf or cr (default from settings).",
        ),
    ] = None,
    mode: Annotated[
        str | None,
        typer.Option(
            "--mode",
            "-m",
            help="Octal permission bits for a new file (default from settings).",
        ),
    ] = None,
) -> None:
    """Write LINES to PATH, each followed by the line ending.

    An existing file is truncated and keeps its permissions.
    """
    settings = get_settings_from_context(ctx)
    perm = resolve_mode(mode, settings.file_mode)

    if separator is None:
        sep = settings.line_separator
    elif separator.lower() in _SEPARATORS:
        sep = _SEPARATORS[separator.lower()]
    else:
        raise typer.BadParameter(
            f"must be one of {', '.join(_SEPARATORS)}", param_hint="--sep"
        )

    with fs_errors():
        write_file_lines_sep(path, lines, sep, perm, settings.encoding)
