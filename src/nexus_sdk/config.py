"""Configuration objects for the Nexus Mods Python SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_HOST = "api.nexusmods.com"
DEFAULT_USER_AGENT = "nexus-sdk-python/0.1.0"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    host: str = DEFAULT_HOST
    port: int = 443
    user_agent: str = DEFAULT_USER_AGENT
    auth_header_name: str = "apikey"
    timeout_seconds: int = 30
    max_attempts: int = 6
    base_backoff_seconds: int = 1

    @property
    def base_url(self) -> str:
        if self.port == 443:
            return f"https://{self.host}"
        return f"https://{self.host}:{self.port}"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        api_key = os.environ.get("NEXUS_API_KEY")
        if not api_key:
            raise ConfigurationError("NEXUS_API_KEY must be configured")

        return cls(
            api_key=api_key,
            host=os.environ.get("NEXUS_API_HOST", DEFAULT_HOST),
            port=int(os.environ.get("NEXUS_API_PORT", "443")),
            user_agent=os.environ.get("NEXUS_USER_AGENT", DEFAULT_USER_AGENT),
            auth_header_name=os.environ.get("NEXUS_API_HEADER", "apikey"),
            timeout_seconds=int(os.environ.get("NEXUS_TIMEOUT_SECONDS", "30")),
            max_attempts=int(os.environ.get("NEXUS_MAX_ATTEMPTS", "6")),
            base_backoff_seconds=int(os.environ.get("NEXUS_BACKOFF_SECONDS", "1")),
        )


__all__ = ["ClientConfig", "DEFAULT_HOST", "DEFAULT_USER_AGENT"]
