"""Deterministic directory tree traversal.

``walk_dir`` visits the root and every entry below it in lexical order,
reading a whole directory listing before descending into it. Symbolic
links are reported as entries and never followed.

The visitor decides what happens to errors. It is called as
``visitor(path, entry, error)`` and:

- returns ``None`` to continue (suppressing ``error`` if one was given);
- raises to abort the walk, the exception propagating out of ``walk_dir``;
- returns ``WalkAction.SKIP_DIR`` to skip the current directory, or the
  remaining entries of the parent directory when visiting a non-directory;
- returns ``WalkAction.SKIP_ALL`` to stop the walk without error.

If the root cannot be queried, the visitor is called once with
``entry=None``. If a directory cannot be listed, the visitor is called a
second time for that directory with the listing error.
"""

import os

from fskit.filesystem.models import DirEntry, StrPath, WalkAction, WalkVisitor


def walk_dir(root: StrPath, visitor: WalkVisitor) -> None:
    """Walk the tree rooted at ``root``, calling ``visitor`` for each entry.

    Args:
        root: Directory (or single entry) to start from.
        visitor: Callback invoked with ``(path, entry, error)``.

    Raises:
        Exception: Whatever the visitor raises.
    """
    root = os.fspath(root)
    try:
        result = os.lstat(root)
    except OSError as e:
        visitor(root, None, e)
        return

    _walk(root, DirEntry.from_lstat(root, result), visitor)


def _walk(path: str, entry: DirEntry, visitor: WalkVisitor) -> WalkAction | None:
    """Visit ``entry`` and, for directories, its children in lexical order.

    Returns:
        SKIP_ALL to stop the walk, SKIP_DIR when a non-directory asked to
        skip the rest of its parent, otherwise None.
    """
    outcome = visitor(path, entry, None)
    if outcome is not None or not entry.is_dir:
        if outcome is WalkAction.SKIP_DIR and entry.is_dir:
            return None
        return outcome

    try:
        children = _read_dir(path)
    except OSError as e:
        outcome = visitor(path, entry, e)
        if outcome is WalkAction.SKIP_DIR:
            return None
        return outcome

    for child in children:
        outcome = _walk(child.path, child, visitor)
        if outcome is WalkAction.SKIP_DIR:
            break
        if outcome is WalkAction.SKIP_ALL:
            return outcome
    return None


def _read_dir(path: str) -> list[DirEntry]:
    """List ``path`` sorted by entry name."""
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)
    return [DirEntry.from_os_entry(e) for e in entries]
