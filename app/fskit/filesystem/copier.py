"""File and directory copying.

All copies honor an ``overwrite`` flag: an existing destination file is
left untouched unless ``overwrite`` is true. Copied files receive the
permission bits of their source.

Symbolic links are followed. A link to a file is copied as the target's
content, and a link to a directory is copied as a real directory tree.
A link whose target contains the directory being copied would recurse
forever, so it is skipped with a warning.
"""

import logging
import os
import shutil
import stat as stat_module

from fskit.filesystem.create import ensure_dir
from fskit.filesystem.models import DirEntry, StrPath, WalkAction
from fskit.filesystem.query import exists, is_symlink
from fskit.filesystem.walk import walk_dir

logger = logging.getLogger(__name__)


def copy(src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
    """Copy ``src`` to ``dst``, dispatching on whether ``src`` is a directory.

    Args:
        src: Source file or directory (symbolic links are followed).
        dst: Destination path.
        overwrite: Replace existing destination files.

    Raises:
        FileNotFoundError: If ``src`` does not exist.
        OSError: On the first entry that cannot be copied.
    """
    if stat_module.S_ISDIR(os.stat(src).st_mode):
        copy_dir(src, dst, overwrite)
    else:
        copy_file(src, dst, overwrite)


def copy_file(src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
    """Copy the content and permission bits of file ``src`` to ``dst``.

    Nothing happens if ``dst`` exists and ``overwrite`` is false.

    Raises:
        FileNotFoundError: If ``src`` does not exist.
        OSError: If reading, writing or chmod fails.
    """
    _copy_file(src, dst, os.stat(src), overwrite)


def copy_dir(src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
    """Copy the tree rooted at ``src`` to ``dst``.

    Directories (empty ones included) are created with their source's
    permission bits; files are copied as by ``copy_file``. Entries are
    processed in lexical order. The first failure aborts the copy, and
    whatever was already copied stays in place.

    Raises:
        FileNotFoundError: If ``src`` does not exist.
        OSError: On the first entry that cannot be copied.
    """
    _copy_tree(os.fspath(src), os.fspath(dst), overwrite, ancestors=())


def _copy_tree(src: str, dst: str, overwrite: bool, ancestors: tuple[str, ...]) -> None:
    """Copy one tree; ``ancestors`` holds the real roots of enclosing copies."""
    root = os.path.realpath(src) if is_symlink(src) else src
    real_root = os.path.realpath(root)
    ancestors = (*ancestors, real_root)

    def visit(path: str, entry: DirEntry | None, error: OSError | None) -> WalkAction | None:
        if error is not None:
            raise error
        if entry is None:
            return None

        target = dst if path == root else os.path.join(dst, os.path.relpath(path, root))
        result = os.stat(path)

        if not stat_module.S_ISDIR(result.st_mode):
            _copy_file(path, target, result, overwrite)
            return None

        if entry.is_symlink:
            real_target = os.path.realpath(path)
            anchors = (os.path.realpath(os.path.dirname(path)), *ancestors)
            if any(_is_within(anchor, real_target) for anchor in anchors):
                logger.warning("Skipping symlink cycle %s -> %s", path, real_target)
                return None
            logger.debug("Following directory symlink %s -> %s", path, real_target)
            _copy_tree(path, target, overwrite, ancestors)
            return None

        ensure_dir(target, stat_module.S_IMODE(result.st_mode))
        return None

    walk_dir(root, visit)


def _copy_file(src: StrPath, dst: StrPath, src_stat: os.stat_result, overwrite: bool) -> None:
    """Stream ``src`` into ``dst`` and apply the source permission bits."""
    if exists(dst) and not overwrite:
        logger.debug("Skipping existing file %s", dst)
        return

    logger.debug("Copying %s -> %s", src, dst)
    with open(src, "rb") as src_file, open(dst, "wb") as dst_file:
        shutil.copyfileobj(src_file, dst_file)

    os.chmod(dst, stat_module.S_IMODE(src_stat.st_mode))


def _is_within(path: str, parent: str) -> bool:
    """Report whether ``path`` equals ``parent`` or lies below it."""
    try:
        return os.path.commonpath([path, parent]) == parent
    except ValueError:
        # Different drives on Windows.
        return False
