"""Custom exceptions for the notation engine."""

from __future__ import annotations


class XenError(Exception):
    """Base exception for all chuk-mcp-xen errors."""

    pass


class NotationError(XenError, ValueError):
    """
    A piece of interval notation could not be understood.

    Carries the offending token and the notation that was expected so
    callers can point at the exact substring.
    """

    def __init__(self, message: str, token: str = "", expected: str = "") -> None:
        super().__init__(message)
        self.token = token
        self.expected = expected


class MalformedTokenError(NotationError):
    """Token matches none of the known notations."""

    pass


class InvalidNumericError(NotationError):
    """Numeric field is zero, negative or non-finite where that is not allowed."""

    pass


class VectorOverflowError(NotationError):
    """Monzo has more components than the prime basis."""

    pass


class ConfigurationError(XenError):
    """Error in configuration."""

    pass
