"""Async HTTP client with retried transport and a client-side rate limit."""

from __future__ import annotations

from contextlib import asynccontextmanager
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter
from httpx_retries import Retry, RetryTransport

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Mapping
    from types import TracebackType

    from mapmerge.config.http_resilience import HttpClientConfig, RateLimit, RetryPolicy

log = getLogger(__name__)

# Room reads are idempotent; nothing else is ever sent.
RETRYABLE_METHODS = ("GET", "HEAD")


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        allowed_methods=RETRYABLE_METHODS,
        status_forcelist=sorted(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
        backoff_factor=policy.backoff_factor,
        backoff_jitter=policy.backoff_jitter,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
    )


def _build_limiter(ratelimit: RateLimit | None) -> AsyncLimiter | None:
    if ratelimit is None:
        return None
    return AsyncLimiter(ratelimit.max_calls, ratelimit.per_seconds)


class ResilientClient:
    """Thin wrapper over ``httpx.AsyncClient`` used by the room source.

    ``transport`` sits underneath the retry layer, so an ``httpx.MockTransport``
    passed here still goes through the retry policy.
    """

    def __init__(
        self,
        config: HttpClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter = _build_limiter(config.ratelimit)
        self._client = httpx.AsyncClient(
            base_url=config.base_url or "",
            timeout=config.timeout_seconds,
            headers=dict(config.headers),
            transport=RetryTransport(transport=transport, retry=build_retry(config.retry)),
        )

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, *, params: Mapping[str, str] | None = None) -> httpx.Response:
        async with self._throttle():
            log.debug("%s: GET %s", self.config.name, url)
            return await self._client.get(url, params=params)

    @asynccontextmanager
    async def _throttle(self) -> AsyncIterator[None]:
        if self._limiter is None:
            yield
            return
        async with self._limiter:
            yield
