"""Remote map read from a shared room over HTTP.

The room endpoint reports ``synced: false`` until the server holds the room's
complete state. ``wait_until_ready`` polls it, rate-limited and retried, and
keeps the first synchronised payload as the snapshot.
"""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from mapmerge.adapters.http_resilience import ResilientClient
from mapmerge.adapters.records import RoomPayload, parse_map
from mapmerge.config.http_resilience import HttpClientConfig, RateLimit
from mapmerge.config.remote import RemoteConfig
from mapmerge.domain.ports.remote import RemoteSourceError, RemoteSourceTimeoutError

from .base import SnapshotSource

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)

type ClientFactory = Callable[[HttpClientConfig], ResilientClient]


def _default_client_config(config: RemoteConfig) -> HttpClientConfig:
    return HttpClientConfig(
        name="rooms",
        base_url=config.base_url,
        ratelimit=RateLimit(max_calls=4, per_seconds=1.0),
        headers={"Accept": "application/json"},
    )


def _default_client_factory(config: HttpClientConfig) -> ResilientClient:
    return ResilientClient(config)


class HttpRemoteGraphSource(SnapshotSource):
    def __init__(
        self,
        room: str,
        *,
        config: RemoteConfig | None = None,
        client_config: HttpClientConfig | None = None,
        client_factory: ClientFactory = _default_client_factory,
    ) -> None:
        super().__init__()
        self.room = room.strip()
        self.config = config or RemoteConfig.from_environment()
        self.client_config = client_config or _default_client_config(self.config)
        self.client_factory = client_factory

    def describe(self) -> str:
        return f"room {self.room!r}"

    def open(self) -> None:
        if not self.room:
            raise RemoteSourceError("Room code must not be blank")
        super().open()

    def wait_until_ready(self, timeout: float | None = None) -> None:
        """Block until the room is synchronised, then keep its snapshot."""

        self._require_open()
        if self.is_ready:
            return
        effective_timeout = self.config.sync_timeout_seconds if timeout is None else timeout
        payload = asyncio.run(self._await_synced_room(effective_timeout))
        nodes, edges = parse_map(payload)
        self._deliver(nodes, edges)
        log.info("Synchronised %s: %s factors, %s links", self.describe(), len(nodes), len(edges))

    async def _await_synced_room(self, timeout: float) -> RoomPayload:
        async with self.client_factory(self.client_config) as client:
            try:
                async with asyncio.timeout(timeout):
                    while True:
                        payload = await self._fetch_room(client)
                        if payload.synced:
                            return payload
                        log.debug("%s not synchronised yet", self.describe())
                        await asyncio.sleep(self.config.poll_interval_seconds)
            except TimeoutError as exc:
                raise RemoteSourceTimeoutError(
                    f"{self.describe()} did not synchronise within {timeout}s"
                ) from exc

    async def _fetch_room(self, client: ResilientClient) -> RoomPayload:
        try:
            response = await client.get(f"rooms/{self.room}")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RemoteSourceError(
                f"Fetching {self.describe()} failed with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise RemoteSourceError(f"Fetching {self.describe()} failed: {exc}") from exc

        try:
            return RoomPayload.model_validate(response.json())
        except ValueError as exc:  # invalid JSON or schema
            raise RemoteSourceError(f"Malformed payload for {self.describe()}: {exc}") from exc
