"""Utilities package - Helper functions for text, path and JSON processing."""

from .text_utils import (
    split_lines,
    leading_lines
)

from .path_utils import (
    normalize_path,
    to_json_path,
    tree_key_path
)

from .json_utils import dumps_json

__all__ = [
    # Text utils
    'split_lines',
    'leading_lines',
    
    # Path utils
    'normalize_path',
    'to_json_path',
    'tree_key_path',
    
    # JSON utils
    'dumps_json'
]
