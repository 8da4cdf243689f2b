from __future__ import annotations

"""
Verbosity Levels.

Closed set of verbosity levels accepted on the command line, and their
mapping onto the numeric severities of the standard logging module.
"""

import logging
from enum import Enum
from typing import Dict

from fscount.domain.errors import InvalidLogLevelError

# Above CRITICAL: nothing passes the filter
_SILENT: int = logging.CRITICAL + 10


class LogLevel(Enum):
    """Verbosity requested through -l/--log-level."""

    NONE = "NONE"
    ERROR = "ERROR"
    INFO = "INFO"
    DEBUG = "DEBUG"

    @classmethod
    def parse(cls, token: str) -> "LogLevel":
        """
        Resolve a raw command line token into a LogLevel.

        Matching is case-sensitive: 'debug' is rejected.

        Args:
            token: Raw value given to -l/--log-level.

        Returns:
            LogLevel: The matching level.

        Raises:
            InvalidLogLevelError: If the token names no known level.
        """
        try:
            return cls(token)
        except ValueError:
            raise InvalidLogLevelError(token) from None

    def to_logging(self) -> int:
        """Numeric severity threshold for the standard logging module."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS: Dict[LogLevel, int] = {
    LogLevel.NONE: _SILENT,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}
