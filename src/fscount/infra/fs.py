from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and pre-flight validation of the target
directory, as an abstraction over the 'os' module.
"""

import os
from typing import Optional

from fscount.domain.config import DEFAULT_TARGET_DIRECTORY
from fscount.domain.errors import TargetDirectoryError

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str = DEFAULT_TARGET_DIRECTORY) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def resolve_target_directory(path: Optional[str]) -> str:
    """
    Normalize the target directory and verify that it can be enumerated.

    Args:
        path: Raw target directory as given on the command line.

    Returns:
        str: Absolute path of an existing directory.

    Raises:
        TargetDirectoryError: If the path does not exist or is not a directory.
    """
    resolved = normalize_path(path)
    if not os.path.isdir(resolved):
        raise TargetDirectoryError(path or resolved)
    return resolved
