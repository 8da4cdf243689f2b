from __future__ import annotations

"""
Counting Configuration Domain.

Holds the immutable configuration value produced by the argument parser and
consumed once by the counter, together with the depth and entry-type models
it is built from.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from fscount.domain.log_level import LogLevel

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_TARGET_DIRECTORY = "."
DEFAULT_PATTERN = "*"
DEFAULT_DEPTH = 1
DEFAULT_LOG_LEVEL = LogLevel.INFO


class EntryType(Enum):
    """Classification of a filesystem node for counting purposes."""

    FILE = "f"
    DIRECTORY = "d"


# -----------------------------------------------------------------------------
# Depth Model
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Depth:
    """
    Recursion bound of an enumeration.

    Either unbounded (limit is None) or bounded to a positive number of
    levels below the target directory. Level 1 holds the direct children.

    Attributes:
        limit: Maximum level counted, or None for no limit.
    """
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.limit is not None and (isinstance(self.limit, bool) or self.limit < 1):
            raise ValueError(f"Depth must be a positive integer, got {self.limit!r}.")

    @classmethod
    def unbounded(cls) -> "Depth":
        return cls(None)

    @classmethod
    def bounded(cls, limit: int = DEFAULT_DEPTH) -> "Depth":
        return cls(int(limit))

    @property
    def is_unbounded(self) -> bool:
        return self.limit is None

    def allows(self, level: int) -> bool:
        """Tell whether entries found at the given level are in range."""
        return self.limit is None or level <= self.limit

    def __str__(self) -> str:
        return "unbounded" if self.limit is None else str(self.limit)


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CountConfig:
    """
    Resolved, validated configuration of one counting run.

    Attributes:
        target_directory: Root path whose descendants are enumerated.
        count_files: Whether regular files are counted.
        count_directories: Whether directories are counted.
        depth: Recursion bound of every enumeration query.
        patterns: Ordered glob patterns; each one is queried separately.
        log_level: Verbosity of the log channel.
    """
    target_directory: str = DEFAULT_TARGET_DIRECTORY
    count_files: bool = False
    count_directories: bool = False
    depth: Depth = field(default_factory=Depth.unbounded)
    patterns: Tuple[str, ...] = (DEFAULT_PATTERN,)
    log_level: LogLevel = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but stored as a tuple
        object.__setattr__(self, "patterns", tuple(self.patterns))
        if not self.patterns:
            raise ValueError("At least one pattern is required.")

    @property
    def entry_types(self) -> Tuple[EntryType, ...]:
        """Entry types selected for counting, files first."""
        selected = []
        if self.count_files:
            selected.append(EntryType.FILE)
        if self.count_directories:
            selected.append(EntryType.DIRECTORY)
        return tuple(selected)


def get_default_config() -> CountConfig:
    """
    Generate the configuration used when no flag is given.

    Returns:
        CountConfig: Default configuration (counts nothing).
    """
    return CountConfig()
