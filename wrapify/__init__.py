"""
wrapify - paragraph reflow

Normalizes whitespace in a block of prose and re-flows each paragraph to a
maximum line width, indenting either the first line of every paragraph
(wrapify) or its continuation lines (iwrapify).
"""

from .processing.reflow import wrapify, iwrapify, TextReflower

wrap = wrapify
wrap_hanging = iwrapify

__version__ = "0.1.0"

__all__ = ['wrapify', 'iwrapify', 'wrap', 'wrap_hanging', 'TextReflower']
