"""Unit tests for directory tree traversal."""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from fskit.filesystem.models import DirEntry, WalkAction
from fskit.filesystem.walk import walk_dir

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX symlinks")


class Recorder:
    """Visitor that records relative paths and answers with preset actions."""

    def __init__(self, root: Path, actions: dict[str, WalkAction] | None = None) -> None:
        self.root = root
        self.actions = actions or {}
        self.visited: list[str] = []
        self.errors: list[tuple[str, OSError]] = []

    def _rel(self, path: str) -> str:
        rel = os.path.relpath(path, self.root)
        return "." if rel == "." else Path(rel).as_posix()

    def __call__(
        self, path: str, entry: DirEntry | None, error: OSError | None
    ) -> WalkAction | None:
        rel = self._rel(path)
        if error is not None:
            self.errors.append((rel, error))
            return None
        self.visited.append(rel)
        return self.actions.get(rel)


class TestWalkDir:
    """Tests for walk_dir."""

    def test_visits_in_lexical_order(self, sample_tree: Path) -> None:
        """Root first, then entries depth-first in name order."""
        recorder = Recorder(sample_tree)

        walk_dir(sample_tree, recorder)

        assert recorder.visited == [".", "a.txt", "b", "b/c.txt", "b/d", "e.sh"]
        assert recorder.errors == []

    def test_paths_are_prefixed_by_root(self, sample_tree: Path) -> None:
        """Visited paths are the root joined with the relative path."""
        paths: list[str] = []

        def visit(path: str, entry: DirEntry | None, error: OSError | None) -> None:
            paths.append(path)

        walk_dir(str(sample_tree), visit)

        assert paths[0] == str(sample_tree)
        assert os.path.join(str(sample_tree), "b", "c.txt") in paths

    def test_entry_describes_path(self, sample_tree: Path) -> None:
        """Each entry carries the name and type of its path."""
        entries: dict[str, DirEntry] = {}

        def visit(path: str, entry: DirEntry | None, error: OSError | None) -> None:
            assert entry is not None
            assert entry.path == path
            entries[entry.name] = entry

        walk_dir(sample_tree, visit)

        assert entries["b"].is_dir is True
        assert entries["a.txt"].is_dir is False
        assert entries["src"].is_dir is True

    def test_skip_dir_on_directory(self, sample_tree: Path) -> None:
        """SKIP_DIR on a directory prevents descending into it."""
        recorder = Recorder(sample_tree, {"b": WalkAction.SKIP_DIR})

        walk_dir(sample_tree, recorder)

        assert recorder.visited == [".", "a.txt", "b", "e.sh"]

    def test_skip_dir_on_file_skips_siblings(self, sample_tree: Path) -> None:
        """SKIP_DIR on a file skips the rest of its parent directory."""
        recorder = Recorder(sample_tree, {"b/c.txt": WalkAction.SKIP_DIR})

        walk_dir(sample_tree, recorder)

        assert recorder.visited == [".", "a.txt", "b", "b/c.txt", "e.sh"]

    def test_skip_dir_on_root(self, sample_tree: Path) -> None:
        """SKIP_DIR on the root ends the walk after the root."""
        recorder = Recorder(sample_tree, {".": WalkAction.SKIP_DIR})

        walk_dir(sample_tree, recorder)

        assert recorder.visited == ["."]

    def test_skip_all_stops_walk(self, sample_tree: Path) -> None:
        """SKIP_ALL stops the walk without raising."""
        recorder = Recorder(sample_tree, {"b/c.txt": WalkAction.SKIP_ALL})

        walk_dir(sample_tree, recorder)

        assert recorder.visited == [".", "a.txt", "b", "b/c.txt"]

    def test_visitor_exception_propagates(self, sample_tree: Path) -> None:
        """An exception raised by the visitor aborts the walk."""
        visited: list[str] = []

        def visit(path: str, entry: DirEntry | None, error: OSError | None) -> None:
            visited.append(os.path.basename(path))
            if os.path.basename(path) == "b":
                raise RuntimeError("stop here")

        with pytest.raises(RuntimeError, match="stop here"):
            walk_dir(sample_tree, visit)

        assert visited == ["src", "a.txt", "b"]

    def test_missing_root_reports_error(self, tmp_path: Path) -> None:
        """A root that cannot be queried is reported once with no entry."""
        calls: list[tuple[str, DirEntry | None, OSError | None]] = []

        def visit(path: str, entry: DirEntry | None, error: OSError | None) -> None:
            calls.append((path, entry, error))

        missing = tmp_path / "missing"
        walk_dir(missing, visit)

        assert len(calls) == 1
        path, entry, error = calls[0]
        assert path == str(missing)
        assert entry is None
        assert isinstance(error, FileNotFoundError)

    def test_missing_root_error_can_be_raised(self, tmp_path: Path) -> None:
        """A visitor that raises the root error makes walk_dir raise it."""

        def visit(path: str, entry: DirEntry | None, error: OSError | None) -> None:
            if error is not None:
                raise error

        with pytest.raises(FileNotFoundError):
            walk_dir(tmp_path / "missing", visit)

    def test_file_root_is_visited_alone(self, text_file: Path) -> None:
        """A file root is visited once."""
        recorder = Recorder(text_file)

        walk_dir(text_file, recorder)

        assert recorder.visited == ["."]

    def test_listing_error_reported_second_time(self, sample_tree: Path) -> None:
        """A directory that cannot be listed is visited again with the error."""
        recorder = Recorder(sample_tree)
        real_scandir = os.scandir

        def failing_scandir(path: str) -> object:
            if os.path.basename(path) == "b":
                raise PermissionError(13, "denied", path)
            return real_scandir(path)

        with patch("fskit.filesystem.walk.os.scandir", side_effect=failing_scandir):
            walk_dir(sample_tree, recorder)

        assert recorder.visited == [".", "a.txt", "b", "e.sh"]
        assert [rel for rel, _ in recorder.errors] == ["b"]
        assert isinstance(recorder.errors[0][1], PermissionError)

    def test_listing_error_skip_dir_continues(self, sample_tree: Path) -> None:
        """Returning SKIP_DIR for a listing error continues with siblings."""
        visited: list[str] = []
        real_scandir = os.scandir

        def failing_scandir(path: str) -> object:
            if os.path.basename(path) == "b":
                raise PermissionError(13, "denied", path)
            return real_scandir(path)

        def visit(path: str, entry: DirEntry | None, error: OSError | None) -> WalkAction | None:
            if error is not None:
                return WalkAction.SKIP_DIR
            visited.append(os.path.basename(path))
            return None

        with patch("fskit.filesystem.walk.os.scandir", side_effect=failing_scandir):
            walk_dir(sample_tree, visit)

        assert visited == ["src", "a.txt", "b", "e.sh"]

    def test_listing_error_raised_by_visitor_aborts(self, sample_tree: Path) -> None:
        """Raising the listing error aborts the walk."""

        def failing_scandir(path: str) -> object:
            raise PermissionError(13, "denied", path)

        def visit(path: str, entry: DirEntry | None, error: OSError | None) -> None:
            if error is not None:
                raise error

        with (
            patch("fskit.filesystem.walk.os.scandir", side_effect=failing_scandir),
            pytest.raises(PermissionError),
        ):
            walk_dir(sample_tree, visit)

    @posix_only
    def test_symlinks_are_not_followed(self, tmp_path: Path, sample_tree: Path) -> None:
        """A link to a directory is reported but not descended into."""
        (sample_tree / "link").symlink_to(sample_tree / "b")
        entries: dict[str, DirEntry] = {}

        def visit(path: str, entry: DirEntry | None, error: OSError | None) -> None:
            assert entry is not None
            entries[os.path.relpath(path, sample_tree)] = entry

        walk_dir(sample_tree, visit)

        assert entries["link"].is_symlink is True
        assert entries["link"].is_dir is False
        assert os.path.join("link", "c.txt") not in entries

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty root is visited once."""
        root = tmp_path / "empty"
        root.mkdir()
        recorder = Recorder(root)

        walk_dir(root, recorder)

        assert recorder.visited == ["."]
