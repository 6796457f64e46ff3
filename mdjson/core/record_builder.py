"""
Record Building Component.

Merges front matter, resolved title and rendered markup into a flat record.
"""

import logging
from typing import Any, Dict, Optional

from core.constants import CONTENT_KEY, TITLE_KEY

logger = logging.getLogger(__name__)


class RecordBuilder:
    """
    Builds the flat record emitted for each document.
    
    Key order: front matter keys as declared, then a derived title, then
    the rendered markup.
    """
    
    @staticmethod
    def build(
        front_matter: Dict[str, Any],
        title: Any,
        markup: str,
        path: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Build a record.
        
        Args:
            front_matter: Parsed front matter mapping
            title: Resolved title, None when unresolved
            markup: Rendered HTML
            path: Document path, used in log messages
            
        Returns:
            Record dictionary
        """
        record = dict(front_matter)
        
        # A front matter title already occupies the slot
        if TITLE_KEY not in record and title is not None:
            record[TITLE_KEY] = title
        
        if CONTENT_KEY in record:
            logger.warning(
                f"Front matter key '{CONTENT_KEY}' in {path or '<document>'} "
                f"is replaced by the rendered markup"
            )
        record[CONTENT_KEY] = markup
        
        return record
