"""
Validation of reflowed text against the layout rules of the wrappers.
"""

import re
from typing import Dict, List, Optional
from dataclasses import dataclass

@dataclass
class ValidationResult:
    """Container for validation results."""
    is_valid: bool
    issues: List[str]
    metrics: Dict[str, float]

class ReflowValidator:
    """
    Checks that a string looks like wrapify/iwrapify output.
    """
    
    def __init__(self, config: Optional[Dict] = None):
        self.config = config or {}
        
        self.style = self.config.get('style', 'lead')
        self.max_line_length = self.config.get('max_line_length', 80)
        self.indent = self.config.get('indent', 3 if self.style == 'lead' else 4)
        
        self.double_space_pattern = re.compile(r'\S {2,}')
        
    def validate(self, text: str) -> ValidationResult:
        """
        Validate reflowed text.
        
        Args:
            text: Output of wrapify or iwrapify
            
        Returns:
            ValidationResult containing validation status and details
        """
        issues = []
        metrics = {}
        
        if '\r' in text:
            issues.append("Text contains carriage returns")
        if '\t' in text:
            issues.append("Text contains tab characters")
        # An empty paragraph sits between two separators; any other blank
        # run leaves a chunk starting with a line-feed
        if any(chunk.startswith('\n') for chunk in text.split('\n\n')):
            issues.append("Text contains more than one consecutive blank line")
            
        lines = text.split('\n')
        issues.extend(self._check_lines(lines))
        issues.extend(self._check_indentation(text))
        
        non_empty = [line for line in lines if line]
        metrics['line_count'] = len(non_empty)
        metrics['longest_line'] = max((len(line) for line in non_empty), default=0)
        metrics['paragraph_count'] = len([p for p in text.split('\n\n') if p.strip()])
        
        return ValidationResult(
            is_valid=len(issues) == 0,
            issues=issues,
            metrics=metrics
        )
        
    def _check_lines(self, lines: List[str]) -> List[str]:
        """Check spacing and length of every line."""
        issues = []
        
        for i, line in enumerate(lines, 1):
            if self.double_space_pattern.search(line.lstrip(' ')):
                issues.append(f"Line {i} contains consecutive spaces")
                
            # A single over-long word is an allowed overflow
            if len(line) > self.max_line_length and len(line.split()) > 1:
                issues.append(f"Line {i} exceeds maximum length ({len(line)} > {self.max_line_length})")
                
        return issues
        
    def _check_indentation(self, text: str) -> List[str]:
        """Check indent placement paragraph by paragraph."""
        issues = []
        lead = ' ' * max(self.indent, 0)
        
        for p, paragraph in enumerate(text.split('\n\n'), 1):
            lines = [line for line in paragraph.split('\n') if line.strip()]
            if not lines:
                continue
                
            first, rest = lines[0], lines[1:]
            if self.style == 'lead':
                if not self._starts_with_exactly(first, lead):
                    issues.append(f"Paragraph {p} first line is not indented by {self.indent}")
                if any(line.startswith(' ') for line in rest):
                    issues.append(f"Paragraph {p} has indented continuation lines")
            else:
                if first.startswith(' '):
                    issues.append(f"Paragraph {p} first line is indented")
                if not all(self._starts_with_exactly(line, lead) for line in rest):
                    issues.append(f"Paragraph {p} continuation lines are not indented by {self.indent}")
                    
        return issues
    
    @staticmethod
    def _starts_with_exactly(line: str, lead: str) -> bool:
        return line.startswith(lead) and not line[len(lead):].startswith(' ')
