"""CLI commands for fskit.

This package contains all subcommand implementations.
"""

from fskit.cli.commands import config, copy, ensure, link, move, remove, resolve, stat, text, tree

__all__ = [
    "config",
    "copy",
    "ensure",
    "link",
    "move",
    "remove",
    "resolve",
    "stat",
    "text",
    "tree",
]
