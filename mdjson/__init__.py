"""
mdjson - Markdown to JSON conversion library.

Turns markdown documents with optional YAML front matter into JSON records
holding rendered HTML, either one file per document or one nested tree.
"""

from .entry_points import convert_document, markdown_to_json, markdown_to_json_batch
from .core import RendererOptions, MarkdownRenderer, TreeAssembler
from .processors import MarkdownJSONProcessor

__all__ = [
    'convert_document',
    'markdown_to_json',
    'markdown_to_json_batch',
    'RendererOptions',
    'MarkdownRenderer',
    'TreeAssembler',
    'MarkdownJSONProcessor',
]
