"""High-level API for readdirtree.

``readdir_sync`` is the single entry point: it applies defaults, validates
the options and normalizes the filters before touching the filesystem,
then walks the tree and returns everything it collected.
"""

import logging
from typing import Any, Mapping, Optional, Union

from .adapters.local import LocalFileSystemAdapter
from .config import TraversalOptions
from .core.adapter import FileSystemAdapter
from .core.node import TraversalResult
from .core.walker import DepthFirstWalker
from .errors import ConfigurationError, MissingOptionsError

logger = logging.getLogger(__name__)


def readdir_sync(
    options: Union[TraversalOptions, Mapping[str, Any], None] = None,
    adapter: Optional[FileSystemAdapter] = None,
) -> TraversalResult:
    """Recursively read a directory tree.

    Args:
        options: TraversalOptions or a mapping with the same keys
                 (root, file_filter, directory_filter, depth, entry_type,
                 lstat). Required.
        adapter: Filesystem adapter, defaults to the local filesystem

    Returns:
        TraversalResult whose ``directories`` and ``files`` are in
        depth-first discovery order

    Raises:
        MissingOptionsError: If options is None
        ConfigurationError: If options are invalid (raised before any
            filesystem access)
        InvalidFilterError: If a glob list mixes negated and plain patterns
        OSError: If the root cannot be resolved or a directory/entry cannot
            be read; the walk is aborted

    Example:
        >>> result = readdir_sync({'root': 'src', 'file_filter': '*.py', 'depth': 2})
        >>> for entry in result.files:
        ...     print(entry.path, entry.size)
    """
    resolved = _resolve_options(options)
    adapter = adapter if adapter is not None else LocalFileSystemAdapter()

    root = adapter.canonicalize(resolved.root)
    logger.debug("Traversing %s (depth=%s, entry_type=%s, lstat=%s)",
                 root, resolved.depth, resolved.entry_type.value, resolved.lstat)

    return DepthFirstWalker(adapter, resolved).walk(root)


def _resolve_options(options) -> TraversalOptions:
    if options is None:
        raise MissingOptionsError()
    if isinstance(options, Mapping):
        options = TraversalOptions.from_mapping(options)
    elif not isinstance(options, TraversalOptions):
        raise ConfigurationError(
            f"options must be TraversalOptions or a mapping, got {type(options).__name__}"
        )
    return options.resolved()
