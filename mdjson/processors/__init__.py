"""
High-level orchestrators for document conversion.
"""

from .md_processor import MarkdownJSONProcessor

__all__ = [
    'MarkdownJSONProcessor',
]
