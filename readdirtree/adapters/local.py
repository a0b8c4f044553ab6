"""Local filesystem adapter for readdirtree.

This adapter backs the walker with the operating system's own directory
listing, stat and path resolution calls.
"""

import os
from pathlib import Path
from typing import List, Union

from ..core.adapter import FileSystemAdapter


class LocalFileSystemAdapter(FileSystemAdapter):
    """Adapter for the local filesystem.

    Errors raised by the operating system are not caught here; a failing
    listdir() or stat() aborts the traversal with the original OSError.
    """

    def list_directory(self, path: str) -> List[str]:
        """List entry names using os.listdir (unsorted)."""
        return os.listdir(path)

    def stat_entry(self, path: str, follow_symlinks: bool = True) -> os.stat_result:
        if follow_symlinks:
            return os.stat(path)
        return os.lstat(path)

    def canonicalize(self, path: Union[str, Path]) -> str:
        """Resolve path to an absolute, symlink-free form.

        Uses strict resolution so that a missing root fails immediately
        with FileNotFoundError instead of producing a dangling anchor.
        """
        return str(Path(os.fspath(path)).resolve(strict=True))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
