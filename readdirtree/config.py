"""Configuration system for readdirtree.

This module defines how callers specify a traversal: where to start, which
entries to keep, how deep to go and whether symbolic links are followed.
Defaults are applied once, here, and the resulting options value is
immutable for the rest of the walk.
"""

import os
import stat
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Union

from .core.filters import accept_all, normalize_filter
from .errors import ConfigurationError

FilterSpec = Union[None, str, List[str], Callable[[Any], bool]]


class EntryType(Enum):
    """Which non-directory entries end up in the ``files`` result.

    Directories are always reported through ``directories`` (subject to the
    directory filter); this setting only governs the file side.
    """
    FILES = "files"              # Regular files and symbolic links
    DIRECTORIES = "directories"  # No file entries at all
    BOTH = "both"                # Same file policy as FILES
    ALL = "all"                  # Every non-directory: sockets, fifos, devices too

    @classmethod
    def parse(cls, value: Union['EntryType', str]) -> 'EntryType':
        """Coerce an enum member or its string value to an EntryType.

        Raises:
            ConfigurationError: If value names no entry type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ', '.join(member.value for member in cls)
        raise ConfigurationError(
            f"Unknown entry type: {value!r}. Choose from: {choices}"
        )

    def accepts_file(self, st: os.stat_result) -> bool:
        """Check whether a non-directory entry is eligible for ``files``.

        Args:
            st: stat or lstat result of the entry

        Returns:
            True if the entry type policy admits the entry
        """
        mode = st.st_mode
        if stat.S_ISDIR(mode):
            return False
        if self is EntryType.ALL:
            return True
        if self is EntryType.DIRECTORIES:
            return False
        return stat.S_ISREG(mode) or stat.S_ISLNK(mode)


@dataclass(frozen=True)
class TraversalOptions:
    """Complete configuration for one traversal.

    This is the primary way callers describe what they want. Filters may be
    given in any shape accepted by ``normalize_filter``; ``resolved()``
    turns them into predicates before the walk starts.
    """

    # Starting directory
    root: Union[str, os.PathLike] = '.'

    # Entry filtering
    file_filter: FilterSpec = None
    directory_filter: FilterSpec = None

    # Depth control (None = unlimited, 0 = root level only)
    depth: Optional[int] = None

    # Which non-directories count as files
    entry_type: Union[EntryType, str] = EntryType.FILES

    # Stat entries without following symbolic links
    lstat: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> 'TraversalOptions':
        """Build options from a plain mapping.

        Keys that are missing or set to None take their default value.

        Raises:
            ConfigurationError: If the mapping contains unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s): {', '.join(unknown)}. "
                f"Valid options are: {', '.join(sorted(known))}"
            )
        return cls(**{key: value for key, value in options.items() if value is not None})

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.root, (str, os.PathLike)):
            errors.append(f"root must be a path, got {type(self.root).__name__}")
        elif os.fspath(self.root) == '':
            errors.append("root cannot be empty")

        if self.depth is not None:
            if isinstance(self.depth, bool) or not isinstance(self.depth, int):
                errors.append(f"depth must be an integer or None, got {self.depth!r}")
            elif self.depth < 0:
                errors.append("depth cannot be negative")

        try:
            EntryType.parse(self.entry_type)
        except ConfigurationError as e:
            errors.append(str(e))

        if not isinstance(self.lstat, bool):
            errors.append(f"lstat must be a boolean, got {self.lstat!r}")

        return errors

    def resolved(self) -> 'TraversalOptions':
        """Return a copy ready for the walker.

        Filters are normalized to predicates (accept-all when absent) and
        the entry type is coerced to the enum. No filesystem access happens
        here.

        Raises:
            ConfigurationError: If validate() reports problems
            InvalidFilterError: If a filter cannot be normalized
        """
        errors = self.validate()
        if errors:
            raise ConfigurationError("Invalid traversal options: " + "; ".join(errors))

        file_filter = normalize_filter(self.file_filter)
        directory_filter = normalize_filter(self.directory_filter)

        return replace(
            self,
            file_filter=accept_all if file_filter is None else file_filter,
            directory_filter=accept_all if directory_filter is None else directory_filter,
            entry_type=EntryType.parse(self.entry_type),
        )
