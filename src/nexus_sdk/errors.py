"""Exceptions raised by the SDK when callers opt into raising results."""

from __future__ import annotations

from typing import Optional


class NexusSdkError(Exception):
    """Base exception for all SDK errors."""

    def __init__(self, message: str, endpoint: Optional[str] = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint


class ConfigurationError(NexusSdkError, ValueError):
    """Raised when the client cannot be configured from its environment."""


class RequestFailedError(NexusSdkError):
    """No usable response was received before the retry budget ran out."""


class HttpStatusError(NexusSdkError):
    def __init__(self, message: str, endpoint: Optional[str] = None, status: Optional[int] = None) -> None:
        super().__init__(message, endpoint)
        self.status = status


class ResponseDecodeError(NexusSdkError):
    """A successful response carried a body that is not valid JSON."""


__all__ = [
    "ConfigurationError",
    "HttpStatusError",
    "NexusSdkError",
    "RequestFailedError",
    "ResponseDecodeError",
]
