"""Filter normalization for readdirtree.

Callers may describe a file or directory filter in several shapes:

- a predicate ``callable(entry) -> bool``
- a single glob pattern such as ``"*.py"`` or ``"!*.pyc"``
- a list of glob patterns, either all inclusive (OR-combined) or all
  negated (AND-combined)

``normalize_filter`` turns any of these into one predicate so that the
walker only ever deals with callables.
"""

from fnmatch import fnmatchcase
from typing import Any, Callable, List, Optional, Sequence

from ..errors import InvalidFilterError
from .node import EntryInfo

EntryPredicate = Callable[[EntryInfo], bool]

NEGATION_PREFIX = '!'


def glob_match(name: str, pattern: str) -> bool:
    """Match a bare entry name against a shell-style glob pattern.

    Supports ``*``, ``?``, ``[seq]`` and ``[!seq]``. Matching is case
    sensitive on every platform. Each leading ``!`` toggles negation.
    Names starting with a dot are only matched by patterns that start
    with a literal dot, so ``*`` does not pick up ``.gitignore``.

    Args:
        name: Entry name (no separators)
        pattern: Glob pattern, optionally negated

    Returns:
        True if the name matches (or, for a negated pattern, does not match)
    """
    negated = False
    while pattern.startswith(NEGATION_PREFIX):
        negated = not negated
        pattern = pattern[1:]

    if not pattern:
        matched = name == ''
    elif name.startswith('.') and not pattern.startswith('.'):
        matched = False
    else:
        matched = fnmatchcase(name, pattern)

    return matched != negated


def is_negated(pattern: str) -> bool:
    return pattern.startswith(NEGATION_PREFIX)


def _all_negated(patterns: Sequence[str]) -> bool:
    """Check whether a pattern list is negated as a whole.

    Raises:
        InvalidFilterError: If negated and non-negated patterns are mixed
    """
    negated = [is_negated(p) for p in patterns]
    if not any(negated):
        return False
    if all(negated):
        return True
    raise InvalidFilterError(
        f"Cannot mix negated with non negated glob filters: {list(patterns)}"
    )


def _pattern_filter(pattern: str) -> EntryPredicate:
    def matches(entry: EntryInfo) -> bool:
        return glob_match(entry.name, pattern)
    return matches


def _pattern_list_filter(patterns: List[str]) -> EntryPredicate:
    if _all_negated(patterns):
        # every exclusion must hold
        def matches(entry: EntryInfo) -> bool:
            return all(glob_match(entry.name, p) for p in patterns)
    else:
        def matches(entry: EntryInfo) -> bool:
            return any(glob_match(entry.name, p) for p in patterns)
    return matches


def normalize_filter(spec: Any) -> Optional[EntryPredicate]:
    """Turn a filter specification into a single predicate.

    Args:
        spec: Callable, glob pattern string, list/tuple of pattern strings,
              or None

    Returns:
        Predicate over EntryInfo, or None when no filter was given (the
        caller substitutes accept-all)

    Raises:
        InvalidFilterError: On mixed negation or an unsupported spec type

    Example:
        >>> predicate = normalize_filter(["*.py", "*.pyi"])
        >>> predicate(entry)  # True for any .py or .pyi entry
    """
    if spec is None:
        return None

    if callable(spec):
        return spec

    if isinstance(spec, str):
        return _pattern_filter(spec.strip())

    if isinstance(spec, (list, tuple)):
        if not all(isinstance(p, str) for p in spec):
            raise InvalidFilterError(
                f"Glob filter lists may only contain strings: {list(spec)!r}"
            )
        return _pattern_list_filter([p.strip() for p in spec])

    raise InvalidFilterError(
        f"Unsupported filter of type {type(spec).__name__}: expected a "
        "callable, a glob pattern or a list of glob patterns"
    )


def accept_all(entry: EntryInfo) -> bool:
    """Default filter used when none was supplied."""
    return True
