"""Unit tests for the root CLI callback and global options."""

import logging
from pathlib import Path

from fskit import __version__
from fskit.cli.main import app
from rich.logging import RichHandler
from typer.testing import CliRunner

runner = CliRunner()


class TestGlobalOptions:
    """Tests for options handled by the root callback."""

    def test_version(self) -> None:
        """--version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"fskit version {__version__}" in result.output

    def test_no_args_shows_help(self) -> None:
        """Running without a command prints usage."""
        result = runner.invoke(app, [])

        assert "Usage" in result.output

    def test_help_lists_commands(self) -> None:
        """Help output lists the available commands."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for name in ("resolve", "copy", "ensure", "stat", "tree", "text", "config"):
            assert name in result.output

    def test_invalid_settings_file_exits(self, tmp_path: Path) -> None:
        """A malformed settings file is reported before any command runs."""
        settings = tmp_path / "settings.toml"
        settings.write_text("[defaults\n")

        result = runner.invoke(app, ["--config", str(settings), "resolve", "x"])

        assert result.exit_code == 1
        assert "Invalid TOML" in result.output

    def test_verbose_installs_rich_handler(self, tmp_path: Path) -> None:
        """--verbose routes fskit logs through a Rich handler at DEBUG."""
        logger = logging.getLogger("fskit")
        handlers = list(logger.handlers)
        level = logger.level
        try:
            result = runner.invoke(app, ["--verbose", "resolve", "x", "--base", str(tmp_path)])

            assert result.exit_code == 0
            assert any(isinstance(h, RichHandler) for h in logger.handlers)
            assert logger.level == logging.DEBUG
        finally:
            logger.handlers = handlers
            logger.setLevel(level)

    def test_settings_file_applies_defaults(self, tmp_path: Path) -> None:
        """Modes from --config are used by commands."""
        settings = tmp_path / "settings.toml"
        settings.write_text('[defaults]\ndir_mode = "0700"\n')
        target = tmp_path / "made"

        result = runner.invoke(app, ["--config", str(settings), "ensure", "dir", str(target)])

        assert result.exit_code == 0
        assert "0700" in result.output
