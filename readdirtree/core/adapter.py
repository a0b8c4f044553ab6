"""FileSystemAdapter abstraction for readdirtree.

The walker never calls ``os`` directly. Everything it needs from the
filesystem goes through an adapter, which keeps the traversal algorithm
independent of where the entries come from and lets tests substitute an
in-memory tree.
"""

import os
from abc import ABC, abstractmethod
from typing import List


class FileSystemAdapter(ABC):
    """Abstract provider of the filesystem primitives used during traversal.

    Subclasses implement listing, stat and canonicalization. Path algebra
    is pure string manipulation and has a default implementation based on
    ``os.path``.
    """

    @abstractmethod
    def list_directory(self, path: str) -> List[str]:
        """Return the names of the immediate entries of a directory.

        The order is whatever the underlying listing yields; callers must
        not assume it is sorted.

        Args:
            path: Absolute path of the directory to list

        Returns:
            List of bare entry names

        Raises:
            OSError: If path is not a readable directory
        """
        pass

    @abstractmethod
    def stat_entry(self, path: str, follow_symlinks: bool = True) -> os.stat_result:
        """Return metadata for a single entry.

        Args:
            path: Absolute path of the entry
            follow_symlinks: stat() when True, lstat() when False

        Raises:
            OSError: If the entry vanished or is inaccessible
        """
        pass

    @abstractmethod
    def canonicalize(self, path: str) -> str:
        """Return the absolute form of path with symlinks resolved.

        Raises:
            OSError: If path does not exist
        """
        pass

    def join_path(self, *parts: str) -> str:
        """Join path segments using the platform separator.

        Empty segments are dropped so that joining onto the root-relative
        empty path yields the bare name.
        """
        parts = tuple(part for part in parts if part)
        if not parts:
            return ''
        return os.path.join(*parts)

    def relative_path(self, base: str, target: str) -> str:
        """Return target relative to base, with "" when they are equal."""
        relative = os.path.relpath(target, base)
        return '' if relative == os.curdir else relative
