"""
Greedy word wrapping with lead or hanging indentation.
"""

from dataclasses import dataclass, field
from typing import List

@dataclass
class LineFill:
    """Running state of a greedy line fill."""
    lines: List[List[str]] = field(default_factory=lambda: [[]])
    line_length: int = 0
    first_line_done: bool = False

def fill_lines(words: List[str], first_line_budget: int, continuation_budget: int,
               continuation_prefix: str = '') -> List[str]:
    """
    Greedily pack words into lines.
    
    A word goes on the current line when the line length, the separating
    space and the word fit in the budget of that line; otherwise it opens a
    new continuation line. Continuation lines start with
    continuation_prefix, which counts towards their length. A word is never
    split and never moved off an empty line, so a word wider than its
    budget overflows on a line of its own.
    
    Args:
        words: Words to place, in order
        first_line_budget: Maximum length of the first line
        continuation_budget: Maximum length of every later line
        continuation_prefix: Text placed in front of every later line
        
    Returns:
        The built lines, without line-feeds
    """
    fill = LineFill()
    
    for word in words:
        current = fill.lines[-1]
        budget = continuation_budget if fill.first_line_done else first_line_budget
        separator = 1 if current else 0
        
        if current and fill.line_length + separator + len(word) > budget:
            fill.lines.append([word])
            fill.first_line_done = True
            fill.line_length = len(continuation_prefix) + len(word)
            continue
            
        current.append(word)
        fill.line_length += separator + len(word)
    
    lines = [' '.join(line_words) for line_words in fill.lines]
    return lines[:1] + [continuation_prefix + line for line in lines[1:]]

def wrap_lead(words: List[str], max_line_length: int, indent: int) -> str:
    """
    Wrap a paragraph whose first line will be indented by the caller.
    
    The first line is reserved indent columns; the returned text carries no
    indentation.
    """
    lines = fill_lines(words, max_line_length - indent, max_line_length)
    return '\n'.join(lines)

def wrap_hanging(words: List[str], max_line_length: int, indent: int) -> str:
    """
    Wrap a paragraph with its continuation lines indented.
    
    Continuation lines are budgeted at max_line_length - indent including
    their indent prefix.
    """
    prefix = ' ' * max(indent, 0)
    lines = fill_lines(words, max_line_length, max_line_length - indent, prefix)
    if len(lines) <= 1:
        return '\n'.join(lines)
    
    # Every continuation line must be at least indent wide
    for i in range(1, len(lines)):
        lines[i] = lines[i].rjust(indent)
    
    return '\n'.join(lines)
