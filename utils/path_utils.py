"""
Path utilities for mapping document paths to output paths and tree keys.
"""
import posixpath
from typing import List

from core.constants import JSON_EXTENSION


def normalize_path(path: str) -> str:
    """
    Normalize a document path to a relative, slash-delimited form.
    
    Args:
        path: Relative path, possibly with backslashes or a leading './'
    
    Returns:
        Path without leading separators or empty segments
    """
    segments = [s for s in path.replace('\\', '/').split('/') if s and s != '.']
    return '/'.join(segments)


def to_json_path(path: str) -> str:
    """Swap the extension of a document path for .json."""
    stem, _ = posixpath.splitext(normalize_path(path))
    return stem + JSON_EXTENSION


def tree_key_path(path: str) -> List[str]:
    """
    Split a document path into tree keys.
    
    Directory segments are kept as-is; the final segment loses its extension.
    
    Args:
        path: Document path such as 'blog/posts/oakland-activist.md'
    
    Returns:
        Key list such as ['blog', 'posts', 'oakland-activist']
    """
    segments = normalize_path(path).split('/')
    if segments == ['']:
        return []
    
    stem, _ = posixpath.splitext(segments[-1])
    segments[-1] = stem or segments[-1]
    return segments
