"""
Text utilities for Markdown-to-JSON conversion.

Handles line splitting and lookahead over markdown bodies.
"""
from typing import List, Optional, Tuple


def split_lines(text: str) -> List[str]:
    """
    Split text into lines, accepting \\n, \\r\\n and \\r endings.
    
    Args:
        text: Raw text
    
    Returns:
        Lines without their terminators
    """
    if not text:
        return []
    return text.splitlines()


def leading_lines(text: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Return the first non-blank line of text and the line right after it.
    
    Args:
        text: Markdown body
    
    Returns:
        Tuple of (first_line, next_line); either may be None
    """
    lines = split_lines(text)
    
    for index, line in enumerate(lines):
        if line.strip():
            following = lines[index + 1] if index + 1 < len(lines) else None
            return line, following
    
    return None, None
