"""Filesystem adapters for readdirtree.

Adapters implement the FileSystemAdapter interface, giving the walker
the listing and stat primitives it needs.
"""

from .local import LocalFileSystemAdapter

__all__ = [
    "LocalFileSystemAdapter",
]
