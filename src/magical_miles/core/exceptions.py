"""Standardized exception hierarchy for the fare service."""

from typing import Any


class FareServiceError(Exception):
    """Base exception for all fare service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransientError(FareServiceError):
    """Errors that may succeed on a later request."""

    pass


class NetworkError(TransientError):
    """Network-related transient errors (timeout, connection refused)."""

    pass


class ServiceUnavailableError(TransientError):
    """External service temporarily unavailable (5xx responses, quota exhausted)."""

    pass


class PermanentError(FareServiceError):
    """Errors that will not succeed on retry."""

    pass


class ValidationError(PermanentError):
    """Invalid input or data format."""

    pass


class MalformedResponseError(ValidationError):
    """External service answered with a payload we cannot interpret."""

    pass
