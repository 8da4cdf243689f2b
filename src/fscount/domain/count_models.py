from __future__ import annotations

"""
Count Result Domain Models.

Data structures used to communicate the outcome of a counting run between
the counter service and the CLI layer.
"""

from dataclasses import dataclass, field
from typing import Tuple

from fscount.domain.config import EntryType


@dataclass(frozen=True)
class PatternCount:
    """
    Outcome of a single enumeration query.

    Attributes:
        entry_type: Type of entries that were counted.
        pattern: Glob pattern the base names were matched against.
        count: Number of matching entries.
    """
    entry_type: EntryType
    pattern: str
    count: int


@dataclass(frozen=True)
class CountResult:
    """
    Aggregate of all queries of a run, in execution order.

    The total is a plain sum: an entry matched by two patterns is counted
    twice.
    """
    breakdown: Tuple[PatternCount, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return sum(item.count for item in self.breakdown)
