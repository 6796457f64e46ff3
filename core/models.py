"""
Core domain models for Markdown-to-JSON conversion.

These are pure data structures without business logic.
"""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Union


class OutputMode(Enum):
    """How converted records are handed back to the driver."""
    PER_FILE = 'per_file'
    CONSOLIDATED = 'consolidated'


@dataclass(frozen=True)
class Document:
    """A source file: slash-delimited relative path plus raw contents."""
    path: str
    contents: Union[bytes, str]

    @property
    def text(self) -> str:
        """Contents decoded as UTF-8, without a leading byte-order mark."""
        if isinstance(self.contents, bytes):
            return self.contents.decode('utf-8-sig')
        return self.contents.lstrip('\ufeff')


@dataclass
class ParsedDocument:
    """A document split into its front matter mapping and markdown body."""
    front_matter: Dict[str, Any]
    body: str
    has_front_matter: bool = False


@dataclass
class OutputDocument:
    """A serialized JSON output ready to be written by the driver."""
    path: str
    contents: bytes

    def json(self) -> Any:
        """Decode the serialized contents."""
        return json.loads(self.contents.decode('utf-8'))


@dataclass
class DocumentError:
    """A failure attached to the document that caused it."""
    path: str
    error: Exception

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'path': self.path,
            'error_type': type(self.error).__name__,
            'message': str(self.error)
        }


@dataclass
class BatchResult:
    """Outputs of a batch run plus the documents that failed."""
    outputs: List[OutputDocument] = field(default_factory=list)
    errors: List[DocumentError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every document converted."""
        return not self.errors


__all__ = [
    'OutputMode',
    'Document',
    'ParsedDocument',
    'OutputDocument',
    'DocumentError',
    'BatchResult',
]
