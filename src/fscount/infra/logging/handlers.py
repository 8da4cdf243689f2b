from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides the console handler factory and the tagging mechanism used to
distinguish the tool's own handlers from external or library-injected ones.
"""

import logging
from typing import TextIO

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_fscount_handler"


def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as an internally-managed application handler.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Verify if a handler was initialized by this module."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_console_handler(
        stream: TextIO,
        level_int: int,
        formatter: logging.Formatter,
) -> logging.StreamHandler:
    """
    Initialize a tagged StreamHandler bound to the given stream.

    Args:
        stream: Destination text stream.
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.

    Returns:
        logging.StreamHandler: Configured handler.
    """
    sh = logging.StreamHandler(stream)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    _tag_handler(sh)
    return sh
