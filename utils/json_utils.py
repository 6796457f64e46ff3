"""
JSON serialization helpers.
"""
import json
from datetime import date, datetime, time
from typing import Any, Optional


def _json_default(value: Any) -> Any:
    """Serialize the YAML scalar types json does not know about."""
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='replace')
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps_json(data: Any, indent: Optional[int] = None) -> bytes:
    """
    Serialize data to UTF-8 JSON bytes.
    
    Args:
        data: Record or tree
        indent: Optional indentation, compact output when None
    
    Returns:
        Encoded JSON
    
    Raises:
        TypeError: For values with no JSON form, including non-string keys
        ValueError: For NaN and infinite floats
    """
    return json.dumps(
        data,
        indent=indent,
        ensure_ascii=False,
        allow_nan=False,
        default=_json_default
    ).encode('utf-8')
