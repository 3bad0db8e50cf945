"""Unit tests for the settings model and settings file I/O."""

import os
import tomllib
from pathlib import Path
from unittest.mock import patch

import pytest
from fskit.core.settings import (
    DEFAULT_SETTINGS,
    FsSettings,
    SettingsError,
    SettingsNotFoundError,
    SettingsParseError,
    format_mode,
    get_settings,
    load_settings,
    parse_mode,
    save_settings,
)
from pydantic import ValidationError


class TestParseMode:
    """Tests for parse_mode."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0o755, 0o755),
            ("0755", 0o755),
            ("755", 0o755),
            ("0o700", 0o700),
            (" 0644 ", 0o644),
            ("7777", 0o7777),
            (0, 0),
        ],
    )
    def test_valid(self, value: object, expected: int) -> None:
        """Integers and octal strings are accepted."""
        assert parse_mode(value) == expected

    @pytest.mark.parametrize("value", ["rwx", "0789", "", "17777", -1, 0o10000, True, 1.5])
    def test_invalid(self, value: object) -> None:
        """Anything that is not a mode in range is rejected."""
        with pytest.raises(ValueError):
            parse_mode(value)

    def test_field_name_in_message(self) -> None:
        """The field name prefixes error messages."""
        with pytest.raises(ValueError, match="^dir_mode: invalid octal mode"):
            parse_mode("abc", "dir_mode")

    def test_format_mode(self) -> None:
        """format_mode renders four octal digits."""
        assert format_mode(0o755) == "0755"
        assert format_mode(0o4755) == "4755"
        assert format_mode(0) == "0000"


class TestFsSettings:
    """Tests for the FsSettings model."""

    def test_defaults(self) -> None:
        """Defaults match the conventional modes and host line ending."""
        settings = FsSettings()

        assert settings.dir_mode == 0o755
        assert settings.file_mode == 0o644
        assert settings.line_separator == os.linesep
        assert settings.encoding == "utf-8"
        assert settings == DEFAULT_SETTINGS

    def test_octal_strings(self) -> None:
        """Modes can be given as octal strings."""
        settings = FsSettings(dir_mode="0700", file_mode="0o600")  # type: ignore[arg-type]

        assert settings.dir_mode == 0o700
        assert settings.file_mode == 0o600

    def test_invalid_mode_rejected(self) -> None:
        """Out-of-range modes fail validation."""
        with pytest.raises(ValidationError, match="dir_mode"):
            FsSettings(dir_mode=0o17777)

    def test_line_separator_restricted(self) -> None:
        """Only LF, CRLF and CR are accepted as separators."""
        assert FsSettings(line_separator="\r\n").line_separator == "\r\n"
        with pytest.raises(ValidationError, match="line_separator"):
            FsSettings(line_separator=";")

    def test_empty_encoding_rejected(self) -> None:
        """The encoding cannot be empty."""
        with pytest.raises(ValidationError):
            FsSettings(encoding="")

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            FsSettings(umask=0o22)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Settings cannot be modified in place."""
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.dir_mode = 0o700  # type: ignore[misc]


class TestLoadSettings:
    """Tests for load_settings and get_settings."""

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """load_settings raises SettingsNotFoundError for a missing file."""
        with pytest.raises(SettingsNotFoundError):
            load_settings(tmp_path / "missing.toml")

    def test_loads_defaults_table(self, tmp_path: Path) -> None:
        """Values are read from the [defaults] table."""
        path = tmp_path / "settings.toml"
        path.write_text('[defaults]\ndir_mode = "0700"\nfile_mode = 384\nencoding = "latin-1"\n')

        settings = load_settings(path)

        assert settings.dir_mode == 0o700
        assert settings.file_mode == 0o600
        assert settings.encoding == "latin-1"
        assert settings.line_separator == os.linesep

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """A file without a [defaults] table yields default values."""
        path = tmp_path / "settings.toml"
        path.write_text("")

        assert load_settings(path) == DEFAULT_SETTINGS

    def test_invalid_toml_raises_parse_error(self, tmp_path: Path) -> None:
        """Malformed TOML raises SettingsParseError."""
        path = tmp_path / "settings.toml"
        path.write_text("[defaults\n")

        with pytest.raises(SettingsParseError, match="Invalid TOML"):
            load_settings(path)

    def test_invalid_value_raises_settings_error(self, tmp_path: Path) -> None:
        """Schema violations raise SettingsError."""
        path = tmp_path / "settings.toml"
        path.write_text('[defaults]\ndir_mode = "rwx"\n')

        with pytest.raises(SettingsError, match="Invalid settings content"):
            load_settings(path)

    def test_non_table_defaults_raises(self, tmp_path: Path) -> None:
        """A scalar defaults entry raises SettingsError."""
        path = tmp_path / "settings.toml"
        path.write_text('defaults = "0755"\n')

        with pytest.raises(SettingsError, match="must be a table"):
            load_settings(path)

    def test_uses_default_path(self, isolated_config_home: Path) -> None:
        """Without a path the XDG settings file is read."""
        path = isolated_config_home / "fskit" / "settings.toml"
        path.parent.mkdir(parents=True)
        path.write_text('[defaults]\nfile_mode = "0600"\n')

        assert load_settings().file_mode == 0o600

    def test_get_settings_missing_returns_defaults(self, tmp_path: Path) -> None:
        """get_settings falls back to defaults when no file exists."""
        assert get_settings(tmp_path / "missing.toml") is DEFAULT_SETTINGS

    def test_get_settings_propagates_parse_errors(self, tmp_path: Path) -> None:
        """get_settings does not hide malformed files."""
        path = tmp_path / "settings.toml"
        path.write_text("[[[")

        with pytest.raises(SettingsParseError):
            get_settings(path)


class TestSaveSettings:
    """Tests for save_settings."""

    def test_writes_octal_strings(self, tmp_path: Path) -> None:
        """Modes are stored as four-digit octal strings."""
        path = tmp_path / "settings.toml"

        result = save_settings(FsSettings(dir_mode=0o700, line_separator="\n"), path)

        assert result == path
        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data["defaults"]["dir_mode"] == "0700"
        assert data["defaults"]["file_mode"] == "0644"
        assert data["defaults"]["line_separator"] == "\n"

    def test_round_trip(self, tmp_path: Path) -> None:
        """Saved settings load back unchanged."""
        path = tmp_path / "nested" / "settings.toml"
        settings = FsSettings(file_mode=0o600, line_separator="\r\n", encoding="utf-16")

        save_settings(settings, path)

        assert load_settings(path) == settings

    def test_default_path(self, isolated_config_home: Path) -> None:
        """Without a path the XDG settings file is written."""
        result = save_settings(DEFAULT_SETTINGS)

        assert result == isolated_config_home / "fskit" / "settings.toml"
        assert result.exists()

    def test_no_temp_file_left(self, tmp_path: Path) -> None:
        """Only the settings file remains after a save."""
        save_settings(DEFAULT_SETTINGS, tmp_path / "settings.toml")

        assert [p.name for p in tmp_path.iterdir()] == ["settings.toml"]

    def test_write_failure_raises_settings_error(self, tmp_path: Path) -> None:
        """Replace failures raise SettingsError and clean up the temp file."""
        with (
            patch("fskit.core.settings.os.replace", side_effect=OSError("read-only")),
            pytest.raises(SettingsError, match="Failed to write settings"),
        ):
            save_settings(DEFAULT_SETTINGS, tmp_path / "settings.toml")

        assert list(tmp_path.iterdir()) == []
