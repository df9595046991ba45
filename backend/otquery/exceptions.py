"""Errors raised inside otquery and converted to ``ErrorResult`` at the call boundary."""

from typing import Optional


class OTQueryError(Exception):
    """Base class for all otquery failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(OTQueryError):
    """Bad arguments, detected before any network call."""


class TransportError(OTQueryError):
    """Non-success HTTP status, unreachable host or timeout."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(OTQueryError):
    """Response body is not JSON or does not have the expected shape."""
