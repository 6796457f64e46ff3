"""
Tree Assembly Component.

Folds records into a nested mapping that mirrors the directory layout of
their source paths.
"""

import logging
from typing import Any, Dict, List, Union

from core.exceptions import InvalidPathError, PathCollisionError
from utils.path_utils import tree_key_path

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class TreeNode:
    """
    A directory level in the tree.
    
    Children map a path segment either to a nested TreeNode or to a record.
    The root node owns the whole structure; nodes hold no parent links.
    """
    
    __slots__ = ('children',)
    
    def __init__(self):
        self.children: Dict[str, Union['TreeNode', Record]] = {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert the subtree to plain nested dictionaries."""
        result = {}
        for key, child in self.children.items():
            if isinstance(child, TreeNode):
                result[key] = child.to_dict()
            else:
                result[key] = child
        return result


class TreeAssembler:
    """
    Builds a nested tree from (path, record) pairs.
    
    Keys keep first-seen insertion order. A path that resolves to an
    occupied slot overwrites it unless strict_paths is set.
    """
    
    def __init__(self, strict_paths: bool = False):
        """
        Initialize assembler.
        
        Args:
            strict_paths: Raise PathCollisionError instead of overwriting
        """
        self.strict_paths = strict_paths
        self.root = TreeNode()
        self.record_count = 0
    
    def _collide(self, path: str, keys: List[str], reason: str) -> None:
        key_path = '.'.join(keys)
        if self.strict_paths:
            raise PathCollisionError(f"Tree key '{key_path}' {reason}", path)
        logger.warning(f"{path}: tree key '{key_path}' {reason}, overwriting")
    
    def insert(self, path: str, record: Record) -> List[str]:
        """
        Insert a record at the key path derived from its document path.
        
        Args:
            path: Document path such as 'blog/posts/other.md'
            record: Record to store at the leaf
            
        Returns:
            Key path the record was stored under
            
        Raises:
            InvalidPathError: If the path has no segments
            PathCollisionError: On collision when strict_paths is set
        """
        keys = tree_key_path(path)
        if not keys:
            raise InvalidPathError(f"Cannot place document with empty path: {path!r}", path)
        
        node = self.root
        for depth, segment in enumerate(keys[:-1], 1):
            child = node.children.get(segment)
            
            if not isinstance(child, TreeNode):
                if child is not None:
                    self._collide(path, keys[:depth], "already holds a document")
                child = TreeNode()
                node.children[segment] = child
            
            node = child
        
        leaf = keys[-1]
        if leaf in node.children:
            existing = node.children[leaf]
            reason = "is already a directory" if isinstance(existing, TreeNode) else "is already taken"
            self._collide(path, keys, reason)
        
        node.children[leaf] = record
        self.record_count += 1
        return keys
    
    def to_dict(self) -> Dict[str, Any]:
        """Return the assembled tree as nested dictionaries."""
        return self.root.to_dict()
