"""
File handling utilities for wrapify.
"""

import os
import yaml
from pathlib import Path
from typing import Union, Dict, Any

def read_file(file_path: Union[str, Path], encoding: str = 'utf-8') -> str:
    """
    Read content from a text file.
    
    Line endings are returned untouched so that CRLF input reaches the
    normalizer as written.
    
    Args:
        file_path: Path to the file
        encoding: File encoding
        
    Returns:
        File content as string
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
        
    with open(file_path, 'r', encoding=encoding, newline='') as f:
        return f.read()
        
def write_file(content: str, file_path: Union[str, Path], encoding: str = 'utf-8') -> None:
    """
    Write content to a text file.
    
    Args:
        content: Content to write
        file_path: Path to the file
        encoding: File encoding
    """
    file_path = Path(file_path)
    
    # Create directory if it doesn't exist
    os.makedirs(file_path.parent, exist_ok=True)
    
    with open(file_path, 'w', encoding=encoding, newline='\n') as f:
        f.write(content)
    
def read_yaml(file_path: Union[str, Path], encoding: str = 'utf-8') -> Dict[str, Any]:
    """
    Read content from a YAML file.
    
    Args:
        file_path: Path to the file
        encoding: File encoding
        
    Returns:
        Parsed YAML content (an empty dict for an empty file)
    """
    content = read_file(file_path, encoding)
    data = yaml.safe_load(content)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {file_path}, got {type(data).__name__}")
    return data
