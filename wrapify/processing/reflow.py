"""
Paragraph reflow: the public wrapify/iwrapify functions and the
config-driven TextReflower built on them.
"""

from typing import Any, Dict, Optional

from .normalizer import Normalizer, PARAGRAPH_SEPARATOR
from .word_wrapper import wrap_lead, wrap_hanging
from .assembler import assemble
from ..utils.logger import get_logger

logger = get_logger(__name__)

STYLES = ('lead', 'hanging')
DEFAULT_INDENTS = {'lead': 3, 'hanging': 4}

def wrapify(text: Optional[str] = None, max_line_length: int = 80, indent: int = 3) -> str:
    """
    Reflow text, indenting the first line of each paragraph.
    
    Args:
        text: Text to wrap; None or empty gives an empty string
        max_line_length: Maximum length of each line, indent included
        indent: Spaces in front of each paragraph's first line
        
    Returns:
        The wrapped text
    """
    if not text:
        return ""
    
    normalizer = Normalizer()
    paragraphs = normalizer.split_paragraphs(text)
    logger.debug(f"Wrapping {len(paragraphs)} paragraph(s) at {max_line_length} columns")
    
    wrapped = [
        wrap_lead(normalizer.extract_words(paragraph), max_line_length, indent)
        for paragraph in paragraphs
    ]
    return assemble(wrapped, lead=' ' * max(indent, 0))

def iwrapify(text: Optional[str] = None, max_line_length: int = 80, indent: int = 4) -> str:
    """
    Reflow text, indenting every line of a paragraph except the first.
    
    Args:
        text: Text to wrap; None or empty gives an empty string
        max_line_length: Maximum length of each line
        indent: Spaces in front of each continuation line
        
    Returns:
        The wrapped text
    """
    if not text:
        return ""
    
    normalizer = Normalizer()
    paragraphs = normalizer.split_paragraphs(text)
    logger.debug(f"Hanging-wrapping {len(paragraphs)} paragraph(s) at {max_line_length} columns")
    
    wrapped = [
        wrap_hanging(normalizer.extract_words(paragraph), max_line_length, indent)
        for paragraph in paragraphs
    ]
    return assemble(wrapped)

class TextReflower:
    """Reflows text according to a configuration dictionary."""
    
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the reflower.
        
        Args:
            config: Optional options: style ('lead' or 'hanging'),
                max_line_length and indent
        """
        self.config = config or {}
        self.style = self.config.get('style', 'lead')
        if self.style not in STYLES:
            raise ValueError(f"Unknown wrap style '{self.style}', expected one of {', '.join(STYLES)}")
        
        self.max_line_length = self._get_int('max_line_length', 80)
        self.indent = self._get_int('indent', DEFAULT_INDENTS[self.style])

    def _get_int(self, key: str, default: int) -> int:
        value = self.config.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"'{key}' must be an integer, got {value!r}")

    def reflow(self, text: Optional[str]) -> str:
        """Reflow text with the configured style."""
        if self.style == 'hanging':
            return iwrapify(text, self.max_line_length, self.indent)
        return wrapify(text, self.max_line_length, self.indent)
        
    def process(self, text: Optional[str]) -> Dict:
        """
        Reflow text and gather statistics about the result.
        
        Args:
            text: Raw text to process
            
        Returns:
            Dictionary containing the reflowed text and its stats
        """
        reflowed = self.reflow(text)
        lines = [line for line in reflowed.split('\n') if line]
        paragraphs = [p for p in reflowed.split(PARAGRAPH_SEPARATOR) if p.strip()]
        
        # A line holding one word longer than the limit is an allowed overflow
        overflow = [line for line in lines
                    if len(line) > self.max_line_length and len(line.split()) == 1]
        
        return {
            'text': reflowed,
            'stats': {
                'paragraphs': len(paragraphs),
                'lines': len(lines),
                'words': len(reflowed.split()),
                'longest_line': max(len(l) for l in lines) if lines else 0,
                'overflow_lines': len(overflow)
            }
        }
