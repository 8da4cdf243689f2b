from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A synthetic directory tree with known counts at every depth.
3. Logging cleanup between tests.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fscount.infra.logging import reset_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a directory tree with known counts.

    Structure:
    /tree
      a.txt
      b.log
      c.txt
      /sub1
        d.txt
        /deep
          e.txt
      /sub2

    Depth 1: 3 files, 2 directories.
    Depth 2: 4 files, 3 directories.
    Unbounded: 5 files, 3 directories.
    """
    root = tmp_path / "tree"
    root.mkdir()

    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / "b.log").write_text("b", encoding="utf-8")
    (root / "c.txt").write_text("c", encoding="utf-8")

    sub1 = root / "sub1"
    sub1.mkdir()
    (sub1 / "d.txt").write_text("d", encoding="utf-8")

    deep = sub1 / "deep"
    deep.mkdir()
    (deep / "e.txt").write_text("e", encoding="utf-8")

    (root / "sub2").mkdir()

    return root


@pytest.fixture(autouse=True)
def clean_logging() -> Iterator[None]:
    """Detach handlers bound to captured streams once a test finishes."""
    yield
    reset_logging()
    logging.getLogger().setLevel(logging.WARNING)
