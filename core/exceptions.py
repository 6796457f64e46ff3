"""
Error kinds raised by the conversion pipeline.

All of them are terminal for the document they concern and are propagated
to the caller.
"""
from typing import Optional


class MarkdownJSONError(Exception):
    """Base class for conversion errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class FrontMatterParseError(MarkdownJSONError):
    """The YAML block between the front matter delimiters is malformed."""


class RenderError(MarkdownJSONError):
    """The Markdown renderer could not produce markup for a body."""


class PathCollisionError(MarkdownJSONError):
    """Two documents resolve to the same key path in the consolidated tree."""


class SerializationError(MarkdownJSONError):
    """A record holds a value that cannot be written as standard JSON."""


class InvalidPathError(MarkdownJSONError):
    """A document path has no segments to place in the tree."""
