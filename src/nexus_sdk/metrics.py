"""Prometheus instruments for the request executor."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_ATTEMPTS = Counter(
    "nexus_sdk_request_attempts_total",
    "Request attempts by outcome",
    ["outcome"],
)
BACKOFF_SECONDS = Histogram(
    "nexus_sdk_backoff_seconds",
    "Seconds slept before retrying a request",
    buckets=(1, 2, 4, 8, 16, 32, 64, 128),
)
RETRY_EXHAUSTED = Counter(
    "nexus_sdk_retry_exhausted_total",
    "Requests that used every attempt without a usable response",
)

__all__ = ["BACKOFF_SECONDS", "REQUEST_ATTEMPTS", "RETRY_EXHAUSTED"]
