"""Logging setup shared by the venueplan reader, model and CLI.

Every module logs through ``get_logger(__name__)``; records propagate to a
single ``venueplan`` logger that owns the only handler. The CLI raises or
lowers that logger's level for ``--verbose`` and ``--quiet``.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "venueplan"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the one venueplan handler, unless that was already done.

    Args:
        level: Initial level of the ``venueplan`` logger.
        format_string: Record format; ``DEFAULT_FORMAT`` when omitted.
        handler: Destination; a stdout ``StreamHandler`` when omitted.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # caplog listens on the Python root logger
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a venueplan module.

    The logger is left at NOTSET so the level set on ``venueplan`` applies.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the venueplan logger and its handler."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the venueplan handler so the next call configures it afresh.

    Used by the test suite to isolate logging state between tests.
    """
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
