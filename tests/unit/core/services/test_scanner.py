from __future__ import annotations

"""
Unit tests for the Filesystem Enumeration Service.

Verifies depth-bounded walking, type selection, glob filtering, and the
handling of symbolic links and unreadable directories.
"""

import logging
import os
from pathlib import Path

import pytest

from fscount.core.services.scanner import count_entries, yield_entries
from fscount.domain.config import Depth, EntryType


@pytest.mark.parametrize(
    "depth, files, directories",
    [
        (Depth.bounded(1), 3, 2),
        (Depth.bounded(2), 4, 3),
        (Depth.bounded(3), 5, 3),
        (Depth.unbounded(), 5, 3),
    ],
)
def test_counts_per_depth(sample_tree: Path, depth: Depth, files: int, directories: int) -> None:
    root = str(sample_tree)
    assert count_entries(root, EntryType.FILE, "*", depth) == files
    assert count_entries(root, EntryType.DIRECTORY, "*", depth) == directories


def test_root_directory_is_never_reported(sample_tree: Path) -> None:
    paths = list(yield_entries(str(sample_tree), EntryType.DIRECTORY, "tree", Depth.unbounded()))
    assert paths == []


def test_files_only_below_depth_limit_are_not_counted(tmp_path: Path) -> None:
    """Files at depth 2 are invisible with depth 1 and counted with depth 2."""
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "x.txt").write_text("x", encoding="utf-8")
    (tmp_path / "nested" / "y.txt").write_text("y", encoding="utf-8")

    assert count_entries(str(tmp_path), EntryType.FILE, "*", Depth.bounded(1)) == 0
    assert count_entries(str(tmp_path), EntryType.FILE, "*", Depth.bounded(2)) == 2


def test_pattern_filters_on_base_name(sample_tree: Path) -> None:
    root = str(sample_tree)
    assert count_entries(root, EntryType.FILE, "*.txt", Depth.bounded(1)) == 2
    assert count_entries(root, EntryType.FILE, "*.log", Depth.unbounded()) == 1
    assert count_entries(root, EntryType.FILE, "*.txt", Depth.unbounded()) == 4
    assert count_entries(root, EntryType.DIRECTORY, "sub*", Depth.unbounded()) == 2


def test_pattern_matching_nothing_counts_zero(sample_tree: Path) -> None:
    assert count_entries(str(sample_tree), EntryType.FILE, "*.md", Depth.unbounded()) == 0


def test_yield_entries_returns_paths_under_root(sample_tree: Path) -> None:
    paths = list(yield_entries(str(sample_tree), EntryType.FILE, "*.txt", Depth.bounded(2)))

    names = sorted(os.path.basename(p) for p in paths)
    assert names == ["a.txt", "c.txt", "d.txt"]
    assert all(p.startswith(str(sample_tree)) for p in paths)


def test_hidden_entries_are_counted(tmp_path: Path) -> None:
    (tmp_path / ".hidden").write_text("h", encoding="utf-8")
    (tmp_path / ".cache").mkdir()

    assert count_entries(str(tmp_path), EntryType.FILE, "*", Depth.unbounded()) == 1
    assert count_entries(str(tmp_path), EntryType.DIRECTORY, "*", Depth.unbounded()) == 1


def test_symbolic_links_are_neither_counted_nor_followed(sample_tree: Path) -> None:
    try:
        os.symlink(sample_tree / "a.txt", sample_tree / "link.txt")
        os.symlink(sample_tree / "sub1", sample_tree / "link_dir", target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("Symbolic links are not supported on this platform.")

    root = str(sample_tree)
    assert count_entries(root, EntryType.FILE, "*", Depth.unbounded()) == 5
    assert count_entries(root, EntryType.DIRECTORY, "*", Depth.unbounded()) == 3


def test_unreadable_directory_is_logged_and_skipped(
        sample_tree: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
) -> None:
    real_scandir = os.scandir
    blocked = str(sample_tree / "sub1")

    def fake_scandir(path):
        if str(path) == blocked:
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)
    caplog.set_level(logging.WARNING)

    # sub1 itself is still listed by its parent, its content is not
    assert count_entries(str(sample_tree), EntryType.FILE, "*", Depth.unbounded()) == 3
    assert count_entries(str(sample_tree), EntryType.DIRECTORY, "*", Depth.unbounded()) == 2
    assert any("Cannot read directory" in r.message for r in caplog.records)
