"""Filesystem utility facade.

This module re-exports the stateless helpers for path resolution,
existence checks, creation, copying, metadata, linking, removal, bulk
text I/O and traversal. Every helper acts on the live filesystem; nothing
is cached between calls.
"""

from fskit.filesystem.copier import copy, copy_dir, copy_file
from fskit.filesystem.create import (
    CREATE_MODE,
    create,
    create_temp,
    ensure_dir,
    ensure_dir_default,
    ensure_file,
    ensure_file_default,
    mkdir,
    mkdir_all,
    mkdir_all_default,
    mkdir_default,
    open_file,
    open_read,
)
from fskit.filesystem.errors import FskitError, ResolveError, UnsupportedOperationError
from fskit.filesystem.meta import chmod, chown, link, remove, remove_all, rename, symlink
from fskit.filesystem.models import DirEntry, FileInfo, StrPath, WalkAction, WalkVisitor
from fskit.filesystem.paths import chdir, cwd, resolve
from fskit.filesystem.query import exists, is_dir, is_file, is_symlink, lstat, stat
from fskit.filesystem.textio import (
    EOL,
    read_file,
    read_file_lines,
    read_text_file,
    write_file,
    write_file_lines,
    write_file_lines_sep,
    write_text_file,
)
from fskit.filesystem.walk import walk_dir

__all__ = [
    "CREATE_MODE",
    "EOL",
    "DirEntry",
    "FileInfo",
    "FskitError",
    "ResolveError",
    "StrPath",
    "UnsupportedOperationError",
    "WalkAction",
    "WalkVisitor",
    "chdir",
    "chmod",
    "chown",
    "copy",
    "copy_dir",
    "copy_file",
    "create",
    "create_temp",
    "cwd",
    "ensure_dir",
    "ensure_dir_default",
    "ensure_file",
    "ensure_file_default",
    "exists",
    "is_dir",
    "is_file",
    "is_symlink",
    "link",
    "lstat",
    "mkdir",
    "mkdir_all",
    "mkdir_all_default",
    "mkdir_default",
    "open_file",
    "open_read",
    "read_file",
    "read_file_lines",
    "read_text_file",
    "remove",
    "remove_all",
    "rename",
    "resolve",
    "stat",
    "symlink",
    "walk_dir",
    "write_file",
    "write_file_lines",
    "write_file_lines_sep",
    "write_text_file",
]
