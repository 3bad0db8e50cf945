"""Error types raised by the filesystem facade.

Operating system failures are surfaced as the built-in ``OSError``
subclasses (``FileNotFoundError``, ``PermissionError``,
``FileExistsError``, ...). The types here cover the two failure kinds
that have no built-in counterpart.
"""


class FskitError(Exception):
    """Base exception for fskit errors."""


class ResolveError(FskitError):
    """Raised when a path cannot be resolved to an absolute path."""


class UnsupportedOperationError(FskitError, OSError):
    """Raised when an operation is not available on the current host."""
