"""Existence checks and metadata queries.

The boolean helpers never raise: ``exists`` answers "is there something
here that is not simply absent", so errors other than not-found count
as existing, while ``is_file``, ``is_dir`` and ``is_symlink`` report
False whenever the underlying query fails.
"""

import os
import stat as stat_module

from fskit.filesystem.models import FileInfo, StrPath


def exists(path: StrPath) -> bool:
    """Report whether something exists at ``path``.

    Permission errors and other failures that are not "not found",
    including paths the host rejects outright (such as an embedded NUL),
    are treated as existing.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except (OSError, ValueError):
        return True
    return True


def is_file(path: StrPath) -> bool:
    """Report whether ``path`` resolves to something that is not a directory."""
    try:
        result = os.stat(path)
    except (OSError, ValueError):
        return False
    return not stat_module.S_ISDIR(result.st_mode)


def is_dir(path: StrPath) -> bool:
    """Report whether ``path`` resolves to a directory."""
    try:
        result = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat_module.S_ISDIR(result.st_mode)


def is_symlink(path: StrPath) -> bool:
    """Report whether ``path`` itself is a symbolic link."""
    try:
        result = os.lstat(path)
    except (OSError, ValueError):
        return False
    return stat_module.S_ISLNK(result.st_mode)


def stat(path: StrPath) -> FileInfo:
    """Return metadata for ``path``, following symbolic links.

    Raises:
        FileNotFoundError: If the path does not exist.
        OSError: If the path cannot be queried.
    """
    return FileInfo.from_stat_result(path, os.stat(path))


def lstat(path: StrPath) -> FileInfo:
    """Return metadata for ``path`` without following symbolic links.

    Raises:
        FileNotFoundError: If the path does not exist.
        OSError: If the path cannot be queried.
    """
    return FileInfo.from_stat_result(path, os.lstat(path))
