"""
wrapify - Validation Module

This module provides validation tools for reflowed text.
"""

from .reflow_validator import ReflowValidator, ValidationResult

__all__ = ['ReflowValidator', 'ValidationResult']
