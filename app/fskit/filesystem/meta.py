"""Permissions, ownership, links, renames and removal.

Each function is a direct pass-through to the corresponding host call.
Errors propagate unchanged and nothing is retried.
"""

import errno
import logging
import os
import shutil
import stat as stat_module

from fskit.filesystem.errors import UnsupportedOperationError
from fskit.filesystem.models import StrPath

logger = logging.getLogger(__name__)


def chmod(path: StrPath, perm: int) -> None:
    """Change the mode of ``path``, following symbolic links.

    Which bits take effect is host-defined; on Windows only the owner
    write bit is honored.
    """
    os.chmod(path, perm)


def chown(path: StrPath, uid: int, gid: int) -> None:
    """Change the numeric owner and group of ``path``, following symbolic links.

    A ``uid`` or ``gid`` of -1 leaves that value unchanged.

    Raises:
        UnsupportedOperationError: If the host has no ownership model.
        PermissionError: If the caller may not change ownership.
    """
    if not hasattr(os, "chown"):
        raise UnsupportedOperationError(
            errno.ENOSYS, "chown is not supported on this platform", os.fspath(path)
        )
    os.chown(path, uid, gid)


def link(src: StrPath, dst: StrPath) -> None:
    """Create ``dst`` as a hard link to ``src``."""
    os.link(src, dst)


def symlink(target: StrPath, link_path: StrPath) -> None:
    """Create ``link_path`` as a symbolic link pointing at ``target``.

    ``target`` is stored verbatim and need not exist.
    """
    os.symlink(target, link_path)


def rename(src: StrPath, dst: StrPath) -> None:
    """Rename (move) ``src`` to ``dst``.

    An existing non-directory ``dst`` is replaced. The rename is atomic
    only where the host guarantees it (same filesystem on POSIX); moves
    across devices fail rather than falling back to copying.
    """
    os.replace(src, dst)


def remove(path: StrPath) -> None:
    """Remove a file, symbolic link, or empty directory.

    Raises:
        FileNotFoundError: If the path does not exist.
        OSError: If the path is a non-empty directory (``errno.ENOTEMPTY``).
    """
    if stat_module.S_ISDIR(os.lstat(path).st_mode):
        os.rmdir(path)
    else:
        os.remove(path)


def remove_all(path: StrPath) -> None:
    """Remove ``path`` and everything below it.

    A missing ``path`` is not an error. Symbolic links are removed
    themselves; their targets are left alone.

    Raises:
        OSError: On the first entry that cannot be removed.
    """
    try:
        result = os.lstat(path)
    except FileNotFoundError:
        return

    if stat_module.S_ISDIR(result.st_mode):
        logger.debug("Removing directory tree %s", path)
        shutil.rmtree(path)
    else:
        os.remove(path)
