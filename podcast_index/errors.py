"""
Error types for the Podcast Index library.

Every public operation either returns a parsed response or raises exactly
one of the classes below.
"""

from typing import Optional


class PodcastIndexError(Exception):
    """Base exception for Podcast Index-related errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class EncodingError(PodcastIndexError):
    """A query option value could not be encoded."""


class SigningError(PodcastIndexError):
    """The clock reading handed to the signer is unusable."""


class TransportError(PodcastIndexError):
    """The HTTP exchange failed or returned a non-success status."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: str = "",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status = status
        self.body = body


class PodcastIndexAuthError(TransportError):
    """Authentication errors with Podcast Index API."""


class ParseError(PodcastIndexError):
    """The response body is not valid JSON."""

    def __init__(self, message: str, body: str = "", cause: Optional[Exception] = None) -> None:
        super().__init__(message, cause)
        self.body = body


class ValidationError(PodcastIndexError):
    """Raised by the schema validator only, never by request methods."""

    def __init__(self, message: str, endpoint: Optional[str] = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint


class SchemaNotFoundError(ValidationError):
    """No schema is registered for an endpoint in the requested API version."""
