"""
Front Matter Splitting Component.

Responsible for separating a YAML metadata block from the markdown body.
"""

import logging
from datetime import date, datetime, time
from typing import Any, Optional

import yaml

from core.constants import FRONT_MATTER_DELIMITER
from core.exceptions import FrontMatterParseError
from core.models import ParsedDocument

logger = logging.getLogger(__name__)


class FrontMatterSplitter:
    """
    Splits raw document text into front matter and body.
    
    A block is recognised only when the very first line is '---' and a later
    line is '---' as well. Anything else leaves the text untouched.
    """
    
    @staticmethod
    def _is_delimiter(line: str) -> bool:
        return line.rstrip('\r\n') == FRONT_MATTER_DELIMITER
    
    @classmethod
    def split(cls, text: str, path: Optional[str] = None) -> ParsedDocument:
        """
        Split text into front matter mapping and body.
        
        Args:
            text: Raw document text
            path: Document path, used in error messages
            
        Returns:
            ParsedDocument with front_matter and body
            
        Raises:
            FrontMatterParseError: If the YAML block is malformed or not a mapping
        """
        lines = text.splitlines(keepends=True)
        
        if not lines or not cls._is_delimiter(lines[0]):
            return ParsedDocument(front_matter={}, body=text)
        
        closing = None
        for index in range(1, len(lines)):
            if cls._is_delimiter(lines[index]):
                closing = index
                break
        
        if closing is None:
            logger.debug(f"Unclosed front matter block in {path or '<document>'}, treating as body")
            return ParsedDocument(front_matter={}, body=text)
        
        yaml_block = ''.join(lines[1:closing])
        body = ''.join(lines[closing + 1:])
        
        return ParsedDocument(
            front_matter=cls.parse_yaml(yaml_block, path),
            body=body,
            has_front_matter=True
        )
    
    @staticmethod
    def _key_to_str(key: Any) -> str:
        if isinstance(key, str):
            return key
        if isinstance(key, (datetime, date, time)):
            return key.isoformat()
        if isinstance(key, bool):
            return 'true' if key else 'false'
        if key is None:
            return 'null'
        return str(key)
    
    @classmethod
    def stringify_keys(cls, value: Any) -> Any:
        """
        Turn every mapping key in a YAML value into a string.
        
        YAML allows dates, numbers and booleans as keys; JSON objects do not.
        
        Args:
            value: Parsed YAML value
            
        Returns:
            Same structure with string keys at every level
        """
        if isinstance(value, dict):
            return {cls._key_to_str(k): cls.stringify_keys(v) for k, v in value.items()}
        if isinstance(value, list):
            return [cls.stringify_keys(item) for item in value]
        return value
    
    @classmethod
    def parse_yaml(cls, yaml_block: str, path: Optional[str] = None) -> dict:
        """
        Parse a YAML block into a mapping.
        
        Args:
            yaml_block: Text between the delimiters
            path: Document path, used in error messages
            
        Returns:
            Parsed mapping with string keys, empty for an empty block
        """
        try:
            parsed = yaml.safe_load(yaml_block)
        except yaml.YAMLError as exc:
            raise FrontMatterParseError(f"Malformed YAML front matter: {exc}", path) from exc
        
        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            # e.g. a document opening with a '---' thematic break
            raise FrontMatterParseError(
                f"Block between leading '---' lines is not a YAML mapping "
                f"(parsed as {type(parsed).__name__}); front matter needs key: value pairs",
                path
            )
        return cls.stringify_keys(parsed)
