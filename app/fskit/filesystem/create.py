"""File and directory creation.

Covers opening and creating files, creating directories, and the
"ensure" helpers that only create a path when nothing exists there yet.
Returned file objects belong to the caller, who must close them.
"""

import errno
import logging
import os
import stat as stat_module
from tempfile import NamedTemporaryFile
from typing import IO, BinaryIO

from fskit.core.settings import DEFAULT_SETTINGS
from fskit.filesystem.models import StrPath
from fskit.filesystem.query import exists, is_dir

logger = logging.getLogger(__name__)

# Mode used by create(), before umask.
CREATE_MODE = 0o666


def create(path: StrPath) -> BinaryIO:
    """Create or truncate ``path`` and open it for reading and writing.

    A new file is created with mode 0666 (before umask).

    Raises:
        OSError: If the file cannot be created or opened.
    """
    return open(path, "w+b")


def open_read(path: StrPath) -> BinaryIO:
    """Open ``path`` for reading in binary mode.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be opened.
    """
    return open(path, "rb")


def open_file(path: StrPath, flags: int, perm: int = CREATE_MODE) -> BinaryIO:
    """Open ``path`` with explicit ``os.O_*`` flags.

    This is the generalized open call. If ``os.O_CREAT`` is given and the
    file does not exist, it is created with ``perm`` (before umask).

    Args:
        path: File to open.
        flags: Bitwise OR of ``os.O_*`` flags.
        perm: Permission bits used when the file is created.

    Returns:
        Binary file object wrapping the opened descriptor.

    Raises:
        OSError: If the file cannot be opened.
    """
    fd = os.open(path, flags | getattr(os, "O_BINARY", 0), perm)
    try:
        return os.fdopen(fd, _fdopen_mode(flags))
    except BaseException:
        os.close(fd)
        raise


def create_temp(directory: StrPath = "", pattern: str = "") -> IO[bytes]:
    """Create a new, uniquely named file and open it for reading and writing.

    The random part of the name replaces the last ``*`` in ``pattern``;
    without a ``*`` it is appended to ``pattern``. An empty ``directory``
    selects the system temporary directory. The caller is responsible for
    removing the file; its path is available as ``.name``.

    Raises:
        ValueError: If ``pattern`` contains a path separator.
        OSError: If the file cannot be created.
    """
    if os.sep in pattern or (os.altsep and os.altsep in pattern):
        raise ValueError(f"Pattern contains path separator: {pattern!r}")

    head, star, tail = pattern.rpartition("*")
    prefix, suffix = (head, tail) if star else (pattern, "")

    return NamedTemporaryFile(
        mode="w+b",
        dir=os.fspath(directory) or None,
        prefix=prefix,
        suffix=suffix,
        delete=False,
    )


def mkdir(path: StrPath, perm: int) -> None:
    """Create a single directory with ``perm`` (before umask).

    Raises:
        FileExistsError: If the path already exists.
        FileNotFoundError: If the parent directory does not exist.
    """
    os.mkdir(path, perm)


def mkdir_default(path: StrPath) -> None:
    """Create a single directory with the default directory mode."""
    mkdir(path, DEFAULT_SETTINGS.dir_mode)


def mkdir_all(path: StrPath, perm: int) -> None:
    """Create a directory along with any missing parents.

    Every directory created receives ``perm`` (before umask). Nothing
    happens if ``path`` is already a directory.

    Raises:
        NotADirectoryError: If ``path`` exists and is not a directory.
        OSError: If a directory cannot be created.
    """
    path = os.fspath(path)
    try:
        result = os.stat(path)
    except OSError:
        pass
    else:
        if stat_module.S_ISDIR(result.st_mode):
            return
        raise OSError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)

    trimmed = path.rstrip(os.sep + (os.altsep or ""))
    parent = os.path.dirname(trimmed)
    if parent and parent != trimmed:
        mkdir_all(parent, perm)

    try:
        os.mkdir(path, perm)
    except OSError:
        # Lost a race, or the path is "." / a drive root.
        if is_dir(path):
            return
        raise


def mkdir_all_default(path: StrPath) -> None:
    """Create a directory and missing parents with the default directory mode."""
    mkdir_all(path, DEFAULT_SETTINGS.dir_mode)


def ensure_dir(path: StrPath, perm: int) -> None:
    """Create ``path`` and missing parents unless something already exists there.

    Existence alone short-circuits: a file at ``path`` is left untouched
    and no error is raised.

    Args:
        path: Directory to ensure.
        perm: Permission bits for every directory created.
    """
    if exists(path):
        return

    logger.debug("Creating directory %s (mode %04o)", path, perm)
    mkdir_all(path, perm)


def ensure_dir_default(path: StrPath) -> None:
    """Ensure a directory exists, creating it with the default directory mode."""
    ensure_dir(path, DEFAULT_SETTINGS.dir_mode)


def ensure_file(path: StrPath, perm: int) -> None:
    """Create an empty file at ``path`` unless something already exists there.

    The file is created, closed, then chmod-ed to ``perm`` in a separate
    call, so the two steps are not atomic.

    Args:
        path: File to ensure.
        perm: Permission bits applied after creation.
    """
    if exists(path):
        return

    logger.debug("Creating file %s (mode %04o)", path, perm)
    with open(path, "wb"):
        pass
    os.chmod(path, perm)


def ensure_file_default(path: StrPath) -> None:
    """Ensure a file exists, creating it with the default file mode."""
    ensure_file(path, DEFAULT_SETTINGS.file_mode)


def _fdopen_mode(flags: int) -> str:
    """Map ``os.O_*`` access flags onto an ``open()`` mode string."""
    access = flags & (os.O_WRONLY | os.O_RDWR)
    append = bool(flags & os.O_APPEND)
    if access == os.O_WRONLY:
        return "ab" if append else "wb"
    if access == os.O_RDWR:
        return "a+b" if append else "r+b"
    return "rb"
