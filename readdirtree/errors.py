"""Exception types raised by readdirtree.

Configuration problems are detected before the filesystem is touched and
surface as ``ConfigurationError`` subclasses. Filesystem failures are not
wrapped: the ``OSError`` raised by the adapter propagates unchanged.
"""


class ReaddirError(Exception):
    """Base class for all readdirtree errors."""


class ConfigurationError(ReaddirError, ValueError):
    """Raised when traversal options are missing or invalid."""


class MissingOptionsError(ConfigurationError):
    """Raised when no options were passed at all."""

    def __init__(self, message: str = "Need to pass at least one argument: options"):
        super().__init__(message)


class InvalidFilterError(ConfigurationError):
    """Raised when a filter specification cannot be turned into a predicate.

    The most common cause is a list that mixes negated (``!*.tmp``) and
    non-negated (``*.py``) glob patterns.
    """
