from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from nexus_sdk.client import NexusClient
from nexus_sdk.config import ClientConfig


class RecordingObserver:
    def __init__(self) -> None:
        self.calls: List[int] = []

    def on_backoff(self, seconds: int) -> None:
        self.calls.append(seconds)


@pytest.fixture()
def sleeps(monkeypatch) -> List[float]:
    recorded: List[float] = []
    monkeypatch.setattr("nexus_sdk.executor.time.sleep", recorded.append)
    return recorded


@pytest.fixture()
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture()
def make_client(observer: RecordingObserver) -> Callable[..., NexusClient]:
    def factory(handler: Callable[[httpx.Request], httpx.Response], **overrides) -> NexusClient:
        cfg = ClientConfig(api_key="test-key", **overrides)
        return NexusClient(cfg, transport=httpx.MockTransport(handler), observer=observer)

    return factory
