"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fskit.core.settings import format_mode
from fskit.core.theme import get_rich_theme
from fskit.filesystem.models import FileInfo


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
_theme = get_rich_theme()
console = Console(theme=_theme, color_system=_detect_color_system())
err_console = Console(theme=_theme, stderr=True, color_system=_detect_color_system())


def entry_style(info: FileInfo) -> str:
    """Pick the theme style for an entry based on its type."""
    if info.is_symlink:
        return "entry.symlink"
    if info.is_dir:
        return "entry.directory"
    return "entry.file"


def format_size(size_bytes: int) -> str:
    """Format a byte count as a human-readable string."""
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def create_info_table(path: str, info: FileInfo) -> Table:
    """Create a two-column table describing a metadata snapshot.

    Args:
        path: Path the metadata was queried for.
        info: Metadata snapshot.

    Returns:
        Rich Table with one row per attribute.
    """
    table = Table(
        title=escape(path),
        show_header=False,
        border_style="border",
    )
    table.add_column("Field", style="bold_header", no_wrap=True)
    table.add_column("Value", style="text")

    if info.is_symlink:
        kind = "symlink"
    elif info.is_dir:
        kind = "directory"
    elif info.is_regular:
        kind = "file"
    else:
        kind = "other"

    table.add_row("Name", f"[{entry_style(info)}]{escape(info.name)}[/]")
    table.add_row("Type", kind)
    table.add_row("Size", f"{format_size(info.size)} ({info.size} bytes)")
    table.add_row("Mode", format_mode(info.perm))
    table.add_row("Modified", info.mtime.isoformat(timespec="seconds"))
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
