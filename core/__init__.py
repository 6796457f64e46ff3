"""Core package - Domain models, constants and error kinds."""

from .models import (
    OutputMode,
    Document,
    ParsedDocument,
    OutputDocument,
    DocumentError,
    BatchResult
)
from .constants import (
    TITLE_KEY,
    CONTENT_KEY,
    DEFAULT_OUTPUT_FILENAME,
    JSON_EXTENSION,
    FRONT_MATTER_DELIMITER
)
from .exceptions import (
    MarkdownJSONError,
    FrontMatterParseError,
    RenderError,
    PathCollisionError,
    SerializationError,
    InvalidPathError
)

__all__ = [
    'OutputMode',
    'Document',
    'ParsedDocument',
    'OutputDocument',
    'DocumentError',
    'BatchResult',
    'TITLE_KEY',
    'CONTENT_KEY',
    'DEFAULT_OUTPUT_FILENAME',
    'JSON_EXTENSION',
    'FRONT_MATTER_DELIMITER',
    'MarkdownJSONError',
    'FrontMatterParseError',
    'RenderError',
    'PathCollisionError',
    'SerializationError',
    'InvalidPathError'
]
