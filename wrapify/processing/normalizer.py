"""
Whitespace normalization: raw text to paragraphs, paragraphs to words.
"""

import re
from typing import List

PARAGRAPH_SEPARATOR = '\n\n'

class Normalizer:
    """Splits raw text into paragraphs and paragraphs into words."""
    
    def __init__(self):
        self.blank_run_pattern = re.compile(r'\n{3,}')
        self.whitespace_pattern = re.compile(r'\s+')
        
    def split_paragraphs(self, text: str) -> List[str]:
        """
        Split raw text into paragraph sources.
        
        CRLF pairs become LF and any run of three or more line-feeds is
        capped at one blank line before splitting on it. The pieces keep
        their soft breaks and surrounding whitespace; those are resolved
        by extract_words().
        
        Args:
            text: Raw text
            
        Returns:
            Paragraph sources in input order
        """
        text = text.replace('\r\n', '\n')
        text = self.blank_run_pattern.sub(PARAGRAPH_SEPARATOR, text)
        return text.split(PARAGRAPH_SEPARATOR)
    
    def extract_words(self, paragraph: str) -> List[str]:
        """
        Extract the ordered word list of a single paragraph.
        
        Args:
            paragraph: Paragraph source, possibly containing soft breaks
            
        Returns:
            Words in order, never empty strings
        """
        paragraph = paragraph.replace('\r\n', '\n')
        
        # Soft breaks become ordinary word boundaries
        joined = ' '.join(line.strip() for line in paragraph.split('\n'))
        joined = joined.replace('\t', ' ')
        
        return [word for word in self.whitespace_pattern.split(joined) if word]
