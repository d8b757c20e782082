"""Nexus Mods Python SDK."""

from .client import NexusClient
from .config import ClientConfig
from .errors import HttpStatusError, NexusSdkError, RequestFailedError, ResponseDecodeError
from .executor import RateLimitedExecutor
from .models import ApiError, ErrorCode, JsonResult, RawResponse
from .observers import BackoffObserver, CallbackObserver, LoggingBackoffObserver

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "BackoffObserver",
    "CallbackObserver",
    "ClientConfig",
    "ErrorCode",
    "HttpStatusError",
    "JsonResult",
    "LoggingBackoffObserver",
    "NexusClient",
    "NexusSdkError",
    "RateLimitedExecutor",
    "RawResponse",
    "RequestFailedError",
    "ResponseDecodeError",
]
