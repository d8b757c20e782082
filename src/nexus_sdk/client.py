"""Python client for the Nexus Mods public API (v1)."""

from __future__ import annotations

from typing import Callable, Mapping, Optional

import httpx

from .config import ClientConfig
from .decoding import decode_response
from .executor import RateLimitedExecutor
from .models import JsonResult, RawResponse
from .observers import BackoffObserver, CallbackObserver
from .transport import HttpxTransport

Params = Mapping[str, str]


class NexusClient:
    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        observer: Optional[BackoffObserver] = None,
    ) -> None:
        self._transport = HttpxTransport(config.base_url, transport=transport)
        self._executor = RateLimitedExecutor(config, self._transport, observer=observer)

    def __enter__(self) -> "NexusClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._executor.config

    def set_api_header_name(self, header_name: str) -> None:
        self._executor.update_config(auth_header_name=header_name)

    def set_timeout_seconds(self, seconds: int) -> None:
        self._executor.update_config(timeout_seconds=seconds)

    def set_backoff_observer(self, observer: Optional[BackoffObserver]) -> None:
        self._executor.set_observer(observer)

    def set_backoff_callback(self, callback: Optional[Callable[[int], None]]) -> None:
        self._executor.set_observer(CallbackObserver(callback) if callback else None)

    def get(
        self,
        path: str,
        params: Optional[Params] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> Optional[RawResponse]:
        return self._executor.execute(path, params, extra_headers)

    def get_json(
        self,
        path: str,
        params: Optional[Params] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> JsonResult:
        return decode_response(path, self.get(path, params, extra_headers))

    # Mods

    def get_updated_mods(self, game_domain_name: str, params: Optional[Params] = None) -> JsonResult:
        return self.get_json(f"/v1/games/{game_domain_name}/mods/updated.json", params)

    def get_mod_changelogs(
        self, game_domain_name: str, mod_id: str, params: Optional[Params] = None
    ) -> JsonResult:
        return self.get_json(f"/v1/games/{game_domain_name}/mods/{mod_id}/changelogs.json", params)

    def get_latest_added(self, game_domain_name: str) -> JsonResult:
        return self.get_json(f"/v1/games/{game_domain_name}/mods/latest_added.json")

    def get_latest_updated(self, game_domain_name: str) -> JsonResult:
        return self.get_json(f"/v1/games/{game_domain_name}/mods/latest_updated.json")

    def get_trending(self, game_domain_name: str) -> JsonResult:
        return self.get_json(f"/v1/games/{game_domain_name}/mods/trending.json")

    def get_mod(self, game_domain_name: str, mod_id: str) -> JsonResult:
        return self.get_json(f"/v1/games/{game_domain_name}/mods/{mod_id}.json")

    def md5_search(self, game_domain_name: str, md5_hash: str) -> JsonResult:
        return self.get_json(f"/v1/games/{game_domain_name}/mods/md5_search/{md5_hash}.json")

    # Mod files

    def list_mod_files(
        self, game_domain_name: str, mod_id: str, params: Optional[Params] = None
    ) -> JsonResult:
        return self.get_json(f"/v1/games/{game_domain_name}/mods/{mod_id}/files.json", params)

    def get_mod_file(self, game_domain_name: str, mod_id: str, file_id: str) -> JsonResult:
        return self.get_json(f"/v1/games/{game_domain_name}/mods/{mod_id}/files/{file_id}.json")

    def get_file_download_link(self, game_domain_name: str, mod_id: str, file_id: str) -> JsonResult:
        # Non-premium accounts need the key/expires pair from an nxm:// link,
        # which this client does not handle.
        return self.get_json(
            f"/v1/games/{game_domain_name}/mods/{mod_id}/files/{file_id}/download_link.json"
        )

    # Games

    def get_game(self, game_domain_name: str) -> JsonResult:
        return self.get_json(f"/v1/games/{game_domain_name}.json")

    def close(self) -> None:
        self._transport.close()


__all__ = ["NexusClient"]
