"""Depth-first directory walker for readdirtree.

The walker drives a traversal from a canonical root, asking the adapter for
listings and stat results, applying the directory filter to decide descent
and the entry type policy plus file filter to decide which files to keep.
"""

import errno
import logging
import stat
from typing import Iterator, List, Tuple

from .adapter import FileSystemAdapter
from .node import EntryInfo, TraversalResult

logger = logging.getLogger(__name__)

DIRECTORY = 'directory'
FILE = 'file'


class DepthFirstWalker:
    """Depth-first, pre-order walker with filter-then-recurse pruning.

    A directory's entries are all classified before any of its accepted
    subdirectories is entered, and subdirectories are entered in listing
    order. Descent uses an explicit stack, so deep trees are bounded by
    memory rather than by the interpreter's recursion limit.
    """

    def __init__(self, adapter: FileSystemAdapter, options):
        """Initialize walker.

        Args:
            adapter: FileSystemAdapter providing listing and stat
            options: TraversalOptions already passed through resolved()
        """
        self.adapter = adapter
        self.options = options

    def iter_entries(self, root: str) -> Iterator[Tuple[str, EntryInfo]]:
        """Walk the tree below a canonical root.

        Args:
            root: Canonical absolute path; all relative paths are computed
                  against it

        Yields:
            (kind, entry) tuples where kind is DIRECTORY or FILE, in the
            order entries are accepted
        """
        max_depth = self.options.depth
        stack: List[Tuple[str, int]] = [(root, 0)]

        while stack:
            current_dir, depth = stack.pop()
            logger.debug("Reading %s (depth %d)", current_dir, depth)

            subdirs: List[EntryInfo] = []
            for entry in self._read_entries(root, current_dir):
                if entry.is_dir:
                    if self.options.directory_filter(entry):
                        subdirs.append(entry)
                        yield DIRECTORY, entry
                elif self.options.entry_type.accepts_file(entry.stat) and self.options.file_filter(entry):
                    yield FILE, entry

            if not subdirs or depth == max_depth:
                continue

            # Reversed so the first listed subdirectory is popped first
            for subdir in reversed(subdirs):
                stack.append((subdir.full_path, depth + 1))

    def walk(self, root: str) -> TraversalResult:
        """Walk the tree and collect accepted entries.

        Returns:
            TraversalResult with directories and files in discovery order
        """
        result = TraversalResult()
        for kind, entry in self.iter_entries(root):
            if kind == DIRECTORY:
                result.directories.append(entry)
            else:
                result.files.append(entry)
        logger.debug(
            "Walk of %s finished: %d directories, %d files",
            root, len(result.directories), len(result.files),
        )
        return result

    def _read_entries(self, root: str, current_dir: str) -> List[EntryInfo]:
        """List a directory and build an EntryInfo for each of its entries."""
        parent_dir = self.adapter.relative_path(root, current_dir)
        entries = []

        for name in self.adapter.list_directory(current_dir):
            full_path = self.adapter.join_path(current_dir, name)
            st = self._stat(full_path)
            if st is None:
                continue
            entries.append(EntryInfo(
                name=name,
                path=self.adapter.join_path(parent_dir, name),
                full_path=full_path,
                parent_dir=parent_dir,
                full_parent_dir=current_dir,
                stat=st,
            ))

        return entries

    def _stat(self, full_path: str):
        """Stat an entry, returning None for a dangling symlink in follow mode."""
        follow = not self.options.lstat
        try:
            return self.adapter.stat_entry(full_path, follow_symlinks=follow)
        except OSError as e:
            if not follow or e.errno not in (errno.ENOENT, errno.ELOOP):
                raise
            link_stat = self.adapter.stat_entry(full_path, follow_symlinks=False)
            if not stat.S_ISLNK(link_stat.st_mode):
                raise
            logger.debug("Skipping dangling symlink %s", full_path)
            return None
