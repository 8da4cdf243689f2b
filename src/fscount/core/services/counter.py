from __future__ import annotations

"""
Counting Service.

Runs one enumeration query per (pattern, entry type) combination selected
by the configuration and accumulates the results into a single total.
"""

import logging
from typing import List, Optional

from fscount.core.services.scanner import count_entries
from fscount.domain.config import CountConfig
from fscount.domain.count_models import CountResult, PatternCount

logger = logging.getLogger(__name__)


def count(config: CountConfig, root: Optional[str] = None) -> CountResult:
    """
    Compute the aggregate count described by a configuration.

    Patterns are processed in order; for each pattern files are queried
    before directories. Overlapping patterns are not de-duplicated.

    Args:
        config: Resolved counting configuration.
        root: Already-normalized directory to enumerate. Defaults to
              config.target_directory.

    Returns:
        CountResult: Per-query breakdown and total.
    """
    target = root if root is not None else config.target_directory
    logger.debug(
        f"Parameters are directory={target} max_depth={config.depth} "
        f"files={config.count_files} directories={config.count_directories} "
        f"patterns={' '.join(config.patterns)}"
    )

    breakdown: List[PatternCount] = []
    for pattern in config.patterns:
        for entry_type in config.entry_types:
            n = count_entries(target, entry_type, pattern, config.depth)
            breakdown.append(PatternCount(entry_type=entry_type, pattern=pattern, count=n))

    return CountResult(breakdown=tuple(breakdown))
