"""
Logging utility for wrapify.

Reflowed text is written to stdout, so log records always go to stderr.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = 'wrapify'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

class _StderrHandler(logging.StreamHandler):
    """Stream handler that looks up sys.stderr on every record."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass

def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger below the package logger.

    The package logger owns the only handler; module loggers propagate to
    it, so changing its level affects every module at once.

    Args:
        name: Name of the logger (typically __name__)
        level: Optional log level for this logger alone

    Returns:
        Logger instance
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.INFO)
        package_logger.propagate = False

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    return logger

def enable_debug_logging():
    """Enable debug logging for all wrapify loggers."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)

    for handler in package_logger.handlers:
        handler.setLevel(logging.DEBUG)
