"""Core building blocks for readdirtree.

This package contains the entry containers, the filesystem adapter
contract, filter normalization and the depth-first walker.
"""

from .node import EntryInfo, TraversalResult
from .adapter import FileSystemAdapter
from .filters import glob_match, normalize_filter
from .walker import DepthFirstWalker

__all__ = [
    "EntryInfo",
    "TraversalResult",
    "FileSystemAdapter",
    "glob_match",
    "normalize_filter",
    "DepthFirstWalker",
]
