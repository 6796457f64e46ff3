"""
Core conversion components for mdjson.

Each component covers one step: splitting front matter, resolving the
title, rendering markdown, building the record and assembling the tree.
"""

from .front_matter import FrontMatterSplitter
from .title_extractor import TitleExtractor
from .renderer import RendererOptions, MarkdownRenderer
from .record_builder import RecordBuilder
from .tree_assembler import TreeNode, TreeAssembler

__all__ = [
    'FrontMatterSplitter',
    'TitleExtractor',
    'RendererOptions',
    'MarkdownRenderer',
    'RecordBuilder',
    'TreeNode',
    'TreeAssembler',
]
