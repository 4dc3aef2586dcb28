"""
wrapify - Utilities Module

This module provides utility functions for file handling, logging,
and other common operations used throughout the package.
"""

from .logger import get_logger, enable_debug_logging
from .file_handler import read_file, write_file, read_yaml

__all__ = ['get_logger', 'enable_debug_logging', 'read_file', 'write_file', 'read_yaml']
