from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Handlers are
attached directly to the root logger: the tool is a single synchronous
process and every event must be written before the exit code is returned.
"""

import logging
import sys

from fscount.infra.logging.config import LoggingConfig
from fscount.infra.logging.handlers import _create_console_handler, _is_our_handler

# Internal state flag for idempotency tracking
_CONFIGURED_FLAG_ATTR: str = "_fscount_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Execute idempotent configuration of the root logger.

    Checks an internal flag to avoid redundant handler attachments unless
    explicit re-configuration is requested. Re-configuration only detaches
    handlers previously created here.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, bypass the idempotency check and re-initialize handlers.

    Returns:
        logging.Logger: The initialized root logger instance.
    """
    root = logging.getLogger()

    already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return root

    level_int = cfg.level.to_logging()
    root.setLevel(level_int)

    _remove_our_handlers(root)

    if cfg.console:
        stream = cfg.stream if cfg.stream is not None else sys.stderr
        formatter = logging.Formatter(cfg.render_format())
        root.addHandler(_create_console_handler(stream, level_int, formatter))

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


def reset_logging() -> None:
    """Detach our handlers and clear the configured flag."""
    root = logging.getLogger()
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _remove_our_handlers(root: logging.Logger) -> None:
    """Identify and detach all internally-managed handlers from the root."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
