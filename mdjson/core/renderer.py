"""
Markdown Rendering Component.

Wraps markdown-it-py to turn a markdown body into HTML.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from markdown_it import MarkdownIt

from core.constants import DEFAULT_RENDERER_PRESET, GFM_RULES, TYPOGRAPHER_RULES
from core.exceptions import RenderError

logger = logging.getLogger(__name__)


@dataclass
class RendererOptions:
    """
    Named renderer options plus a passthrough bag.
    
    Anything in `extra` is handed to markdown-it unchanged.
    """
    smartypants: bool = False
    html: bool = True
    breaks: bool = False
    preset: str = DEFAULT_RENDERER_PRESET
    extra: Dict[str, Any] = field(default_factory=dict)
    
    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None) -> 'RendererOptions':
        """
        Build options from a flat mapping.
        
        Args:
            options: Mapping such as {'smartypants': True, 'quotes': '«»‹›'}
            
        Returns:
            RendererOptions with unknown keys collected into `extra`
        """
        options = dict(options or {})
        
        return cls(
            smartypants=bool(options.pop('smartypants', False)),
            html=bool(options.pop('html', True)),
            breaks=bool(options.pop('breaks', False)),
            preset=options.pop('preset', DEFAULT_RENDERER_PRESET),
            extra=options
        )
    
    def to_markdown_it(self) -> Dict[str, Any]:
        """Options dict in the shape MarkdownIt expects."""
        options = {
            'html': self.html,
            'breaks': self.breaks,
            'typographer': self.smartypants,
        }
        options.update(self.extra)
        return options


class MarkdownRenderer:
    """
    Renders markdown to HTML.
    
    A renderer is configured once and reused for every document in a batch.
    """
    
    def __init__(self, options: Optional[RendererOptions] = None):
        """
        Initialize renderer.
        
        Args:
            options: Renderer options, defaults when omitted
        """
        self.options = options or RendererOptions()
        self.md = self._build(self.options)
    
    @staticmethod
    def _build(options: RendererOptions) -> MarkdownIt:
        md = MarkdownIt(options.preset, options.to_markdown_it())
        md.enable(GFM_RULES, ignoreInvalid=True)
        
        if options.smartypants:
            md.enable(TYPOGRAPHER_RULES)
        
        logger.debug(f"Markdown renderer ready (preset={options.preset}, smartypants={options.smartypants})")
        return md
    
    def render(self, body: str, path: Optional[str] = None) -> str:
        """
        Render a markdown body.
        
        Args:
            body: Markdown text
            path: Document path, used in error messages
            
        Returns:
            HTML markup
            
        Raises:
            RenderError: If markdown-it fails on the input
        """
        try:
            return self.md.render(body)
        except Exception as exc:
            raise RenderError(f"Markdown rendering failed: {exc}", path) from exc
