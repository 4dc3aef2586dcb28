"""
wrapify - Processing Module

This module holds the reflow pipeline: whitespace normalization, greedy
word wrapping and paragraph assembly.
"""

from .normalizer import Normalizer
from .word_wrapper import fill_lines, wrap_lead, wrap_hanging
from .assembler import assemble
from .reflow import wrapify, iwrapify, TextReflower

__all__ = ['Normalizer', 'fill_lines', 'wrap_lead', 'wrap_hanging', 'assemble',
           'wrapify', 'iwrapify', 'TextReflower']
