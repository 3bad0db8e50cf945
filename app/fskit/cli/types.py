"""Shared types and utilities for CLI commands.

This module provides helpers used across multiple CLI command modules
to avoid code duplication.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

import typer

from fskit.core.settings import DEFAULT_SETTINGS, FsSettings, parse_mode
from fskit.filesystem.errors import FskitError
from fskit.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for inspection commands."""

    TABLE = "table"
    JSON = "json"


def get_settings_from_context(ctx: typer.Context) -> FsSettings:
    """Return the settings loaded by the root callback.

    Falls back to the built-in defaults when a command is invoked
    without the root callback (e.g. directly in tests).
    """
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        settings = obj.get("settings")
        if isinstance(settings, FsSettings):
            return settings
    return DEFAULT_SETTINGS


def resolve_mode(value: str | None, default: int) -> int:
    """Parse a ``--mode`` option, falling back to ``default`` when absent.

    Raises:
        typer.BadParameter: If the value is not a valid octal mode.
    """
    if value is None:
        return default
    try:
        return parse_mode(value, "--mode")
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@contextmanager
def fs_errors() -> Iterator[None]:
    """Report filesystem failures and exit with code 1.

    Raises:
        typer.Exit: If an OSError or FskitError escapes the block.
    """
    try:
        yield
    except (OSError, FskitError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def is_quiet(ctx: typer.Context) -> bool:
    """Return whether the root --quiet flag was given."""
    obj = ctx.find_root().obj
    return isinstance(obj, dict) and bool(obj.get("quiet"))
