from __future__ import annotations

"""
Filesystem Enumeration Service.

Provides the depth-bounded, type-filtered, glob-matched listing of the
entries below a root directory. The root itself is never reported and
symbolic links are neither reported nor followed.
"""

import logging
import os
from collections import deque
from typing import Deque, Iterator, Tuple

from fscount.core.components.filters import matches_pattern
from fscount.domain.config import Depth, EntryType

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def yield_entries(
        root: str,
        entry_type: EntryType,
        pattern: str,
        depth: Depth,
) -> Iterator[str]:
    """
    Traverse the filesystem and yield the paths of the matching entries.

    Walks the tree breadth-first with an explicit level counter: direct
    children of the root are level 1. A subdirectory is only opened when
    its children would still be within the depth bound.

    Args:
        root: Directory whose descendants are enumerated.
        entry_type: Type of entries to report.
        pattern: Glob applied to the base name of each entry.
        depth: Recursion bound.

    Yields:
        str: Path of each matching entry, joined onto the given root.
    """
    pending: Deque[Tuple[str, int]] = deque([(root, 1)])

    while pending:
        current, level = pending.popleft()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.warning(f"Cannot read directory '{current}': {e.strerror or e}")
            continue

        for entry in entries:
            is_dir = entry.is_dir(follow_symlinks=False)

            if is_dir and depth.allows(level + 1):
                pending.append((entry.path, level + 1))

            if not _has_type(entry, entry_type, is_dir):
                continue
            if matches_pattern(entry.name, pattern):
                yield entry.path


def count_entries(
        root: str,
        entry_type: EntryType,
        pattern: str,
        depth: Depth,
) -> int:
    """
    Count the entries that yield_entries would report.

    Args:
        root: Directory whose descendants are enumerated.
        entry_type: Type of entries to count.
        pattern: Glob applied to the base name of each entry.
        depth: Recursion bound.

    Returns:
        int: Number of matching entries.
    """
    logger.debug(
        f"counting for dir={root} depth={depth} type={entry_type.value} pattern={pattern}"
    )
    count = sum(1 for _ in yield_entries(root, entry_type, pattern, depth))
    logger.debug(
        f"dir={root} depth={depth} type={entry_type.value} pattern={pattern} count={count}"
    )
    return count


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _has_type(entry: os.DirEntry, entry_type: EntryType, is_dir: bool) -> bool:
    """Classify a directory entry without following symbolic links."""
    if entry_type is EntryType.DIRECTORY:
        return is_dir
    return entry.is_file(follow_symlinks=False)
