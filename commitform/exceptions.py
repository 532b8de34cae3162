"""Exception classes for commitform.

Contains:
- CommitformError: Base exception for the package
- FormatError: Raised when a free-text field breaks its format rule
- SessionClosedError: Raised when a submitted session is used again
- DraftError: Raised when a draft cannot be read
- GlobalConfigError: Raised when the configuration file cannot be read or written
"""

from typing import Optional


class CommitformError(Exception):
    """Base exception for commitform errors."""

    pass


class FormatError(CommitformError, ValueError):
    """Raised when a free-text field does not match its format rule.

    Attributes:
        message: Human-readable error shown next to the field.
        field: Name of the offending field, if known.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class SessionClosedError(CommitformError):
    """Raised when a session is mutated or submitted after submission."""

    pass


class DraftError(CommitformError):
    """Raised when a saved draft cannot be loaded."""

    pass


class GlobalConfigError(CommitformError):
    """Raised when there's an error with global configuration."""

    pass
