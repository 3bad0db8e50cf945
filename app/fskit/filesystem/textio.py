"""Whole-file reads and writes.

Reads buffer the entire file in memory; there is no streaming variant.
Writes open the file with ``O_WRONLY | O_CREAT | O_TRUNC`` and write the
whole payload at once, so a failure mid-write can leave the file
truncated or partially written. Permission bits are applied only when a
write creates the file.
"""

import os
from collections.abc import Iterable

from fskit.core.settings import DEFAULT_SETTINGS
from fskit.filesystem.models import StrPath

# Host-conventional line ending.
EOL = os.linesep

_WRITE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)


def read_file(path: StrPath) -> bytes:
    """Read the whole file at ``path``.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
    """
    with open(path, "rb") as f:
        return f.read()


def read_text_file(path: StrPath, encoding: str = DEFAULT_SETTINGS.encoding) -> str:
    """Read the whole file at ``path`` as text.

    Line endings are returned exactly as stored.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If the content is not valid in ``encoding``.
    """
    return read_file(path).decode(encoding)


def read_file_lines(path: StrPath, encoding: str = DEFAULT_SETTINGS.encoding) -> list[str]:
    """Read the file at ``path`` as a list of lines without terminators.

    Lines end at ``\\n``; one trailing ``\\r`` is stripped from each line,
    so both LF and CRLF files are handled. A final newline does not
    produce an empty trailing line, and an empty file yields ``[]``.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    text = read_text_file(path, encoding)
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def write_file(path: StrPath, data: bytes, perm: int = DEFAULT_SETTINGS.file_mode) -> None:
    """Write ``data`` to ``path``, creating or truncating it.

    Args:
        path: File to write.
        data: Complete new content.
        perm: Permission bits used only if the file is created (before umask).

    Raises:
        OSError: If the file cannot be opened or written.
    """
    fd = os.open(path, _WRITE_FLAGS, perm)
    with os.fdopen(fd, "wb") as f:
        f.write(data)


def write_text_file(
    path: StrPath,
    text: str,
    perm: int = DEFAULT_SETTINGS.file_mode,
    encoding: str = DEFAULT_SETTINGS.encoding,
) -> None:
    """Write ``text`` to ``path``, creating or truncating it.

    No newline translation is performed.
    """
    write_file(path, text.encode(encoding), perm)


def write_file_lines_sep(
    path: StrPath,
    lines: Iterable[str],
    sep: str,
    perm: int = DEFAULT_SETTINGS.file_mode,
    encoding: str = DEFAULT_SETTINGS.encoding,
) -> None:
    """Write ``lines`` to ``path`` with ``sep`` after every line, the last included.

    The joined content is written in a single call to ``write_text_file``.
    """
    write_text_file(path, "".join(line + sep for line in lines), perm, encoding)


def write_file_lines(
    path: StrPath,
    lines: Iterable[str],
    perm: int = DEFAULT_SETTINGS.file_mode,
    encoding: str = DEFAULT_SETTINGS.encoding,
) -> None:
    """Write ``lines`` to ``path`` terminated by the host line ending."""
    write_file_lines_sep(path, lines, EOL, perm, encoding)
