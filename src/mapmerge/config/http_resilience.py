"""Retry and rate-limit settings for the room server client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Transport retries for room reads.

    A room that is not synchronised yet answers 200 and is polled by the source;
    only gateway errors, throttling and dropped connections are retried here.
    """

    total: int = 3
    backoff_factor: float = 0.25
    max_backoff_wait: float = 10.0
    backoff_jitter: float = 0.5
    respect_retry_after_header: bool = True
    status_forcelist: frozenset[int] = frozenset({429, 502, 503, 504})
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = (
        httpx.TimeoutException,
        httpx.NetworkError,
    )

    @classmethod
    def disabled(cls) -> RetryPolicy:
        return cls(total=0)


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


def _no_headers() -> dict[str, str]:
    return {}


@dataclass(slots=True, frozen=True)
class HttpClientConfig:
    """Everything needed to build one ``ResilientClient``."""

    name: str
    base_url: str | None = None
    timeout_seconds: float = 10.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    headers: Mapping[str, str] = field(default_factory=_no_headers)
