"""Filesystem facade data types.

This module defines the value types returned by the facade: metadata
snapshots, walk entries, and the sentinel outcomes a walk visitor can
return. All of them are point-in-time snapshots with no link back to
the live filesystem.
"""

import os
import stat as stat_module
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import TypeAlias

StrPath: TypeAlias = str | os.PathLike[str]


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Metadata snapshot produced by ``stat`` or ``lstat``.

    Attributes:
        name: Final path component of the queried path.
        size: Size in bytes.
        mode: Raw ``st_mode`` value (file type and permission bits).
        mtime: Last modification time (timezone-aware, UTC).
    """

    name: str
    size: int
    mode: int
    mtime: datetime

    @classmethod
    def from_stat_result(cls, path: StrPath, result: os.stat_result) -> "FileInfo":
        """Build a FileInfo from an ``os.stat_result``.

        Args:
            path: Path that was queried.
            result: Result of ``os.stat`` or ``os.lstat``.

        Returns:
            Immutable FileInfo snapshot.
        """
        return cls(
            name=os.path.basename(os.fspath(path)),
            size=result.st_size,
            mode=result.st_mode,
            mtime=datetime.fromtimestamp(result.st_mtime, tz=UTC),
        )

    @property
    def perm(self) -> int:
        """Permission and special bits (setuid, setgid, sticky)."""
        return stat_module.S_IMODE(self.mode)

    @property
    def is_dir(self) -> bool:
        """Whether the entry is a directory."""
        return stat_module.S_ISDIR(self.mode)

    @property
    def is_symlink(self) -> bool:
        """Whether the entry is a symbolic link (only possible via lstat)."""
        return stat_module.S_ISLNK(self.mode)

    @property
    def is_regular(self) -> bool:
        """Whether the entry is a regular file."""
        return stat_module.S_ISREG(self.mode)


@dataclass(frozen=True, slots=True)
class DirEntry:
    """An entry reached while walking a directory tree.

    Type information comes from the directory listing and never follows
    symbolic links.

    Attributes:
        path: Path of the entry, prefixed by the walk root.
        name: Final path component.
        is_dir: Whether the entry is a directory (a link to one is not).
        is_symlink: Whether the entry is a symbolic link.
    """

    path: str
    name: str
    is_dir: bool
    is_symlink: bool

    @classmethod
    def from_os_entry(cls, entry: os.DirEntry[str]) -> "DirEntry":
        """Build a DirEntry from an ``os.scandir`` entry."""
        return cls(
            path=entry.path,
            name=entry.name,
            is_dir=entry.is_dir(follow_symlinks=False),
            is_symlink=entry.is_symlink(),
        )

    @classmethod
    def from_lstat(cls, path: str, result: os.stat_result) -> "DirEntry":
        """Build a DirEntry for a path that was queried directly."""
        return cls(
            path=path,
            name=os.path.basename(path),
            is_dir=stat_module.S_ISDIR(result.st_mode),
            is_symlink=stat_module.S_ISLNK(result.st_mode),
        )

    def info(self) -> FileInfo:
        """Query the entry's metadata without following symbolic links.

        Raises:
            OSError: If the entry can no longer be queried.
        """
        return FileInfo.from_stat_result(self.path, os.lstat(self.path))


class WalkAction(str, Enum):
    """Sentinel outcomes a walk visitor can return.

    Attributes:
        SKIP_DIR: Do not descend into this directory. Returned for a
            non-directory entry, skips the remaining entries of its parent.
        SKIP_ALL: Stop the walk; ``walk_dir`` returns without error.
    """

    SKIP_DIR = "skip_dir"
    SKIP_ALL = "skip_all"


WalkVisitor: TypeAlias = Callable[[str, DirEntry | None, OSError | None], WalkAction | None]
