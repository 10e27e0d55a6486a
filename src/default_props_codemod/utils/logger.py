"""
Logging setup for the codemod.

Every module logs through a child of the ``default_props_codemod`` logger.
Records go to stderr so ``--print`` output on stdout stays clean.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "default_props_codemod"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.basicConfig(format=LOG_FORMAT, handlers=[logging.StreamHandler(sys.stderr)])
logging.getLogger(PACKAGE_LOGGER).setLevel(logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for a module, or the package logger when name is omitted."""
    return logging.getLogger(name or PACKAGE_LOGGER)


def set_log_level(level: str) -> None:
    """
    Set the level of every codemod logger.

    Args:
        level: Level name such as DEBUG or warning

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)
