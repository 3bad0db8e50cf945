"""Path resolution and working directory helpers."""

import os
from pathlib import Path

from fskit.filesystem.errors import ResolveError
from fskit.filesystem.models import StrPath

# Separators recognized after a leading "~" or "." regardless of host.
_PREFIX_SEPARATORS = ("/", "\\")


def cwd() -> str:
    """Return the current working directory.

    Raises:
        OSError: If the working directory cannot be determined.
    """
    return os.getcwd()


def chdir(path: StrPath) -> None:
    """Change the current working directory to ``path``."""
    os.chdir(path)


def resolve(relative: StrPath, base: StrPath = "") -> str:
    """Resolve ``relative`` to an absolute path.

    Resolution rules, in order:

    - an absolute ``relative`` is returned unchanged;
    - ``~`` alone, or followed by a separator, is resolved against the
      user's home directory and ``base`` is ignored;
    - ``.`` alone, or followed by a separator, is resolved against ``base``;
    - anything else is joined onto ``base``.

    An empty ``base`` stands for the current working directory, and an
    empty ``relative`` resolves to ``base`` itself. Both ``/`` and ``\\``
    are accepted after the ``~`` or ``.`` prefix.

    Args:
        relative: Path to resolve.
        base: Directory that relative paths are resolved against.

    Returns:
        Normalized absolute path.

    Raises:
        ResolveError: If the home directory or working directory cannot be
            determined.
    """
    relative = os.fspath(relative)
    if os.path.isabs(relative):
        return relative

    base = os.fspath(base)
    if not base:
        try:
            base = cwd()
        except OSError as e:
            raise ResolveError(f"Cannot determine working directory: {e}") from e

    if relative == "~" or relative.startswith(tuple("~" + sep for sep in _PREFIX_SEPARATORS)):
        try:
            home = str(Path.home())
        except (RuntimeError, KeyError) as e:
            raise ResolveError(f"Cannot determine home directory: {e}") from e
        return _absolute(os.path.join(home, relative[2:]))

    if relative == "." or relative.startswith(tuple("." + sep for sep in _PREFIX_SEPARATORS)):
        return _absolute(os.path.join(base, relative[2:]))

    return _absolute(os.path.join(base, relative))


def _absolute(path: str) -> str:
    """Normalize ``path`` to an absolute path."""
    try:
        return os.path.abspath(path)
    except (OSError, ValueError) as e:
        raise ResolveError(f"Cannot resolve {path!r}: {e}") from e
