"""
Title Extraction Component.

Resolves a document title from front matter or from the leading heading
of the markdown body.
"""

from typing import Any, Dict, Optional

from core.constants import ATX_H1_PATTERN, SETEXT_H1_UNDERLINE_PATTERN, TITLE_KEY
from utils.text_utils import leading_lines


class TitleExtractor:
    """
    Resolves a title with fixed precedence:
    front matter title, then ATX h1, then setext h1, then nothing.
    """
    
    @staticmethod
    def from_atx(line: str) -> Optional[str]:
        """
        Extract text from a level-1 ATX heading line.
        
        Args:
            line: Candidate heading line
            
        Returns:
            Heading text, or None if the line is not a non-empty h1
        """
        match = ATX_H1_PATTERN.match(line)
        if not match:
            return None
        
        text = match.group(1).strip()
        # '# ###' is an empty heading whose content is the closing sequence
        if not text or set(text) == {'#'}:
            return None
        return text
    
    @staticmethod
    def from_setext(line: str, underline: Optional[str]) -> Optional[str]:
        """
        Extract text from a setext h1 made of line plus '=' underline.
        
        Args:
            line: First non-blank line
            underline: The line immediately after it
            
        Returns:
            Heading text, or None if underline is not all '='
        """
        if underline is None or not SETEXT_H1_UNDERLINE_PATTERN.match(underline):
            return None
        return line.strip() or None
    
    @classmethod
    def from_body(cls, body: str) -> Optional[str]:
        """Derive a title from the first non-blank line of a markdown body."""
        first, following = leading_lines(body)
        if first is None:
            return None
        
        title = cls.from_atx(first)
        if title is not None:
            return title
        
        return cls.from_setext(first, following)
    
    @classmethod
    def resolve(cls, front_matter: Dict[str, Any], body: str) -> Any:
        """
        Resolve the title for a document.
        
        Args:
            front_matter: Parsed front matter mapping
            body: Markdown body after front matter removal
            
        Returns:
            Front matter title verbatim if present, else the derived heading
            text, else None
        """
        if TITLE_KEY in front_matter:
            return front_matter[TITLE_KEY]
        return cls.from_body(body)
