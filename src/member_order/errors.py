"""Error classes for member order checking.

This module provides:
- MemberOrderError: Base exception class for all member order errors
- InvalidConfigurationError: Raised when rule options are invalid
- ParserError: Raised when a source file cannot be read or parsed
"""


class MemberOrderError(Exception):
    """Base exception for all member order errors."""

    pass


class InvalidConfigurationError(MemberOrderError):
    """Raised when the rule configuration is invalid.

    When a specific order entry is at fault it is available as ``entry``.
    """

    def __init__(self, message: str, entry: str | None = None) -> None:
        """Initialise the error.

        Args:
            message: Human-readable description of the problem
            entry: The offending order entry, if any

        """
        super().__init__(message)
        self.entry = entry


class ParserError(MemberOrderError):
    """Raised when source code cannot be read or parsed."""

    pass
