"""Backoff observers notified before every retry sleep."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class BackoffObserver(Protocol):
    def on_backoff(self, seconds: int) -> None:  # pragma: no cover - interface
        ...


class CallbackObserver:
    """Adapts a plain ``callable(seconds)`` to the observer protocol."""

    def __init__(self, callback: Callable[[int], None]) -> None:
        self._callback = callback

    def on_backoff(self, seconds: int) -> None:
        self._callback(seconds)


class LoggingBackoffObserver:
    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def on_backoff(self, seconds: int) -> None:
        self._log.info("sleeping %ss due to rate-limit/network", seconds)


__all__ = ["BackoffObserver", "CallbackObserver", "LoggingBackoffObserver"]
