"""Default permission and text settings.

This module provides the settings model and I/O functions for the
defaults used by the ``*_default`` helpers and the CLI:

- dir_mode: permission bits for directories (default 0755)
- file_mode: permission bits for files (default 0644)
- line_separator: separator appended after each written line
- encoding: text encoding for text reads and writes

Settings are stored in ~/.config/fskit/settings.toml. Modes are written
as octal strings (``dir_mode = "0755"``) so the file stays readable.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fskit.core.paths import get_settings_path

logger = logging.getLogger(__name__)

_MAX_MODE = 0o7777
_LINE_SEPARATORS: tuple[str, ...] = ("\n", "\r\n", "\r")


def parse_mode(value: object, field: str = "mode") -> int:
    """Parse permission bits from an integer or an octal string.

    Args:
        value: Integer mode, or octal text such as "0755", "755" or "0o755".
        field: Name used in error messages.

    Returns:
        Mode as an integer between 0 and 0o7777.

    Raises:
        ValueError: If the value is not a valid mode.
    """
    if isinstance(value, bool):
        msg = f"{field}: mode must be an integer or octal string"
        raise ValueError(msg)
    if isinstance(value, str):
        text = value.strip().lower().removeprefix("0o")
        try:
            value = int(text, 8)
        except ValueError:
            msg = f"{field}: invalid octal mode '{value}'"
            raise ValueError(msg) from None
    if not isinstance(value, int):
        msg = f"{field}: mode must be an integer or octal string"
        raise ValueError(msg)
    if not (0 <= value <= _MAX_MODE):
        msg = f"{field}: mode must be between 0000 and 7777, got {value:o}"
        raise ValueError(msg)
    return value


class FsSettings(BaseModel):
    """Process-wide defaults for filesystem operations.

    Instances are immutable; build a new one to change a value.

    Attributes:
        dir_mode: Permission bits applied to directories created by default helpers.
        file_mode: Permission bits applied to files created by default helpers.
        line_separator: Separator written after every line by line writers.
        encoding: Text encoding used by text reads and writes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dir_mode: Annotated[
        int,
        Field(description="Directory permission bits"),
    ] = 0o755
    file_mode: Annotated[
        int,
        Field(description="File permission bits"),
    ] = 0o644
    line_separator: Annotated[
        str,
        Field(description="Line separator for line writers"),
    ] = os.linesep
    encoding: Annotated[
        str,
        Field(min_length=1, description="Text encoding"),
    ] = "utf-8"

    @field_validator("dir_mode", "file_mode", mode="before")
    @classmethod
    def validate_mode(cls, v: object, info: Any) -> int:
        """Accept integer modes or octal strings such as "0755" or "0o755"."""
        return parse_mode(v, info.field_name)

    @field_validator("line_separator")
    @classmethod
    def validate_line_separator(cls, v: str) -> str:
        """Restrict separators to the conventional line endings."""
        if v not in _LINE_SEPARATORS:
            msg = f"line_separator must be one of {_LINE_SEPARATORS!r}, got {v!r}"
            raise ValueError(msg)
        return v


DEFAULT_SETTINGS = FsSettings()


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> FsSettings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated FsSettings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Settings file not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    section = data.get("defaults", {})
    if not isinstance(section, dict):
        raise SettingsError("Invalid settings content: 'defaults' must be a table")

    try:
        return FsSettings.model_validate(section)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def get_settings(path: Path | None = None) -> FsSettings:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Loaded settings, or DEFAULT_SETTINGS if the file is missing.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        logger.debug("No settings file at %s, using defaults", path or get_settings_path())
        return DEFAULT_SETTINGS


def save_settings(settings: FsSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The FsSettings object to save.
        path: Path to save the settings. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    from tempfile import NamedTemporaryFile

    settings_path = path or get_settings_path()

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump({"defaults": _settings_to_dict(settings)}, f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def format_mode(mode: int) -> str:
    """Format permission bits as a four-digit octal string (e.g. "0755")."""
    return f"{mode:04o}"


def _settings_to_dict(settings: FsSettings) -> dict[str, object]:
    """Convert FsSettings to a dictionary for TOML serialization.

    Args:
        settings: The FsSettings to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return {
        "dir_mode": format_mode(settings.dir_mode),
        "file_mode": format_mode(settings.file_mode),
        "line_separator": settings.line_separator,
        "encoding": settings.encoding,
    }
