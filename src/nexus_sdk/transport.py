"""httpx-backed transport issuing single GET requests."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from .models import RawResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Issues one GET per call; request failures come back as ``None``."""

    def __init__(self, base_url: str, *, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._client = httpx.Client(base_url=base_url, transport=transport)

    def get(
        self,
        path: str,
        params: Optional[Mapping[str, str]],
        headers: Mapping[str, str],
        timeout: float,
    ) -> Optional[RawResponse]:
        try:
            response = self._client.get(path, params=params or None, headers=dict(headers), timeout=timeout)
        except httpx.RequestError as exc:
            # Includes undecodable Content-Encoding bodies and redirect loops.
            logger.warning("GET %s failed without a usable response: %s", path, exc)
            return None
        return RawResponse(status=response.status_code, body=response.content, headers=response.headers)

    def close(self) -> None:
        self._client.close()


__all__ = ["HttpxTransport"]
