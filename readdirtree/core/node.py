"""Entry and result containers for readdirtree.

EntryInfo is intentionally kept simple - it's a data container describing
one filesystem entry as seen from the traversal root. Discovery logic lives
in the walker and the filesystem adapter.
"""

import os
import stat as stat_module
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class EntryInfo:
    """One filesystem entry discovered during traversal.

    Attributes:
        name: Base name of the entry (no path separators)
        path: Path relative to the traversal root
        full_path: Absolute path, anchored at the canonical root
        parent_dir: Containing directory relative to the root ("" at root level)
        full_parent_dir: Absolute path of the containing directory
        stat: Result of stat() or lstat(), depending on configuration
    """

    name: str
    path: str
    full_path: str
    parent_dir: str
    full_parent_dir: str
    stat: os.stat_result = field(repr=False, compare=False)

    @property
    def is_dir(self) -> bool:
        return stat_module.S_ISDIR(self.stat.st_mode)

    @property
    def is_file(self) -> bool:
        return stat_module.S_ISREG(self.stat.st_mode)

    @property
    def is_symlink(self) -> bool:
        # Only ever true when the entry was obtained with lstat
        return stat_module.S_ISLNK(self.stat.st_mode)

    @property
    def size(self) -> int:
        return self.stat.st_size

    @property
    def mtime(self) -> float:
        return self.stat.st_mtime

    def to_dict(self) -> Dict[str, Any]:
        """Return the entry as a plain dictionary."""
        return {
            'name': self.name,
            'path': self.path,
            'full_path': self.full_path,
            'parent_dir': self.parent_dir,
            'full_parent_dir': self.full_parent_dir,
            'stat': self.stat,
        }


@dataclass
class TraversalResult:
    """Directories and files collected by a single traversal.

    Both lists are in discovery order: depth-first, with siblings in the
    order the directory listing returned them. Entries are only ever
    appended.
    """

    directories: List[EntryInfo] = field(default_factory=list)
    files: List[EntryInfo] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.directories) + len(self.files)

    def directory_paths(self) -> List[str]:
        """Relative paths of all collected directories."""
        return [entry.path for entry in self.directories]

    def file_paths(self) -> List[str]:
        """Relative paths of all collected files."""
        return [entry.path for entry in self.files]

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            'directories': [entry.to_dict() for entry in self.directories],
            'files': [entry.to_dict() for entry in self.files],
        }
