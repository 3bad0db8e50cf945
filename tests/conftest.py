"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path

import pytest

# Rich sizes the shared CLI consoles from COLUMNS when fskit is first imported;
# a wide width keeps long tmp_path messages from wrapping in assertions.
os.environ["COLUMNS"] = "1000"


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a per-test directory so user settings never leak in."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree.

    Layout::

        src/
          a.txt          "alpha"
          b/
            c.txt        "charlie"
            d/           (empty)
          e.sh           "echo hi" (mode 0755)
    """
    root = tmp_path / "src"
    (root / "b" / "d").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"alpha")
    (root / "b" / "c.txt").write_bytes(b"charlie")
    script = root / "e.sh"
    script.write_bytes(b"echo hi")
    os.chmod(script, 0o755)
    return root


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A file containing the bytes ``test data``."""
    path = tmp_path / "testfile"
    path.write_bytes(b"test data")
    return path
