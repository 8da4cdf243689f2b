from __future__ import annotations

"""
Entry Name Filtering.

Implements the glob matching applied to the base name of every enumerated
entry, and the exclusion of self/parent references.
"""

import fnmatch
import re
from typing import List

from fscount.domain.config import DEFAULT_PATTERN

# Names made only of dots ('.', '..') refer to the directory itself or its parent
_DOT_REFERENCE_RX = re.compile(r"^\.+$")

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_patterns() -> List[str]:
    """
    Get the pattern list used when -p/--patterns is not given.

    Returns:
        List[str]: A single wildcard matching every name.
    """
    return [DEFAULT_PATTERN]

# -----------------------------------------------------------------------------
# PATTERN MATCHING
# -----------------------------------------------------------------------------

def is_dot_reference(name: str) -> bool:
    """Tell whether a name is composed purely of dots."""
    return _DOT_REFERENCE_RX.match(name) is not None


def matches_pattern(name: str, pattern: str) -> bool:
    """
    Verify if a base name satisfies a glob pattern.

    Matching is case-sensitive on every platform and a leading dot is not
    special: '*' also matches hidden names.

    Args:
        name: Base name of the entry (no directory component).
        pattern: Glob pattern such as '*.txt'.

    Returns:
        bool: True if the name matches and is not a dot reference.
    """
    if is_dot_reference(name):
        return False
    return fnmatch.fnmatchcase(name, pattern)
