"""Rate-limit aware request execution shared by every endpoint call."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple

from .config import ClientConfig
from .metrics import BACKOFF_SECONDS, REQUEST_ATTEMPTS, RETRY_EXHAUSTED
from .models import RawResponse
from .observers import BackoffObserver

logger = logging.getLogger(__name__)

MAX_BACKOFF_EXPONENT = 6


class Transport(Protocol):
    def get(
        self,
        path: str,
        params: Optional[Mapping[str, str]],
        headers: Mapping[str, str],
        timeout: float,
    ) -> Optional[RawResponse]:  # pragma: no cover - interface
        ...


def backoff_delay(attempt: int, base_seconds: int = 1) -> int:
    """Exponential delay for ``attempt`` with the exponent capped at 6."""
    return base_seconds * (2 ** min(attempt, MAX_BACKOFF_EXPONENT))


def rate_limit_fallback(attempt: int, base_seconds: int = 1) -> int:
    """Delay used when a rate-limit header is missing or unreadable; not capped."""
    return base_seconds * (2 ** attempt)


def parse_seconds(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return max(int(value.strip()), 0)
    except ValueError:
        return None


def build_headers(config: ClientConfig, extra_headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    injected = {
        config.auth_header_name: config.api_key,
        "User-Agent": config.user_agent,
        "Accept": "application/json",
    }
    reserved = {name.lower() for name in injected}
    headers = {
        name: value
        for name, value in (extra_headers or {}).items()
        if name.lower() not in reserved
    }
    headers.update(injected)
    return headers


class RateLimitedExecutor:
    """Issues GET requests, sleeping and retrying on network errors and rate limits.

    Configuration is held behind a lock and replaced wholesale on update, so a
    request in flight keeps reading the snapshot it took for its attempt.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Transport,
        observer: Optional[BackoffObserver] = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._observer = observer
        self._lock = threading.Lock()

    @property
    def config(self) -> ClientConfig:
        with self._lock:
            return self._config

    def update_config(self, **changes: Any) -> ClientConfig:
        with self._lock:
            self._config = replace(self._config, **changes)
            return self._config

    def set_observer(self, observer: Optional[BackoffObserver]) -> None:
        with self._lock:
            self._observer = observer

    def _snapshot(self) -> Tuple[ClientConfig, Optional[BackoffObserver]]:
        with self._lock:
            return self._config, self._observer

    def execute(
        self,
        path: str,
        query_params: Optional[Mapping[str, str]] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> Optional[RawResponse]:
        max_attempts = self.config.max_attempts
        attempt = 0

        while attempt < max_attempts:
            attempt += 1
            config, observer = self._snapshot()
            headers = build_headers(config, extra_headers)
            logger.debug("GET %s attempt=%d/%d", path, attempt, max_attempts)

            response = self._transport.get(path, query_params, headers, config.timeout_seconds)
            fallback = rate_limit_fallback(attempt, config.base_backoff_seconds)

            if response is None:
                outcome, reason = "transport_error", "transport error"
                delay = backoff_delay(attempt, config.base_backoff_seconds)
            elif response.status == 429:
                retry_after = parse_seconds(response.headers.get("Retry-After"))
                outcome, reason = "rate_limited", "HTTP 429"
                delay = fallback if retry_after is None else retry_after
            elif response.headers.get("X-RateLimit-Remaining", "").strip() == "0":
                reset = parse_seconds(response.headers.get("X-RateLimit-Reset"))
                outcome, reason = "quota_exhausted", "rate-limit quota exhausted"
                delay = fallback if reset is None else reset
            else:
                REQUEST_ATTEMPTS.labels(outcome="response").inc()
                return response

            REQUEST_ATTEMPTS.labels(outcome=outcome).inc()
            logger.warning(
                "GET %s: %s on attempt %d/%d, backing off %ss",
                path,
                reason,
                attempt,
                max_attempts,
                delay,
            )
            self._backoff(delay, observer)

        RETRY_EXHAUSTED.inc()
        logger.error("GET %s: giving up after %d attempts", path, max_attempts)
        return None

    def _backoff(self, seconds: int, observer: Optional[BackoffObserver]) -> None:
        if observer is not None:
            observer.on_backoff(seconds)
        BACKOFF_SECONDS.observe(seconds)
        time.sleep(seconds)


__all__ = [
    "MAX_BACKOFF_EXPONENT",
    "RateLimitedExecutor",
    "Transport",
    "backoff_delay",
    "build_headers",
    "parse_seconds",
    "rate_limit_fallback",
]
