"""
Joins wrapped paragraphs into the final text.
"""

from typing import Iterable

def assemble(paragraphs: Iterable[str], lead: str = '') -> str:
    """
    Join wrapped paragraphs with one blank line between them.
    
    Each paragraph is emitted as a line-feed, the lead text, the paragraph
    and a closing line-feed. Leading line-feeds are then removed and the
    tail is trimmed until it no longer ends in a blank line, which leaves
    the result ending in a single line-feed.
    
    Args:
        paragraphs: Wrapped paragraph texts
        lead: Text placed before each paragraph's first line
        
    Returns:
        The assembled text
    """
    result = ''.join(f"\n{lead}{paragraph}\n" for paragraph in paragraphs)
    
    result = result.lstrip('\n')
    while result.endswith('\n\n'):
        result = result[:-1]
    
    return result
