"""readdirtree - Recursive directory reading with glob and predicate filters.

Synchronous, depth-first traversal returning the matched directories and
files of a tree, each described by an EntryInfo:

    from readdirtree import readdir_sync

    result = readdir_sync({'root': 'src', 'file_filter': ['*.py', '*.pyi']})
    for entry in result.files:
        print(entry.path)
"""

__version__ = "0.1.0"

from .errors import (
    ReaddirError,
    ConfigurationError,
    MissingOptionsError,
    InvalidFilterError,
)
from .core.node import EntryInfo, TraversalResult
from .core.adapter import FileSystemAdapter
from .core.filters import glob_match, normalize_filter
from .core.walker import DepthFirstWalker
from .adapters.local import LocalFileSystemAdapter
from .config import EntryType, TraversalOptions
from .api import readdir_sync

__all__ = [
    "__version__",
    # API
    "readdir_sync",
    # Config
    "TraversalOptions",
    "EntryType",
    # Core
    "EntryInfo",
    "TraversalResult",
    "FileSystemAdapter",
    "LocalFileSystemAdapter",
    "DepthFirstWalker",
    "glob_match",
    "normalize_filter",
    # Errors
    "ReaddirError",
    "ConfigurationError",
    "MissingOptionsError",
    "InvalidFilterError",
]
