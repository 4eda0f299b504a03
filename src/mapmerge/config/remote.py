"""Remote map source configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_float_env, require_env_var

DEFAULT_SYNC_TIMEOUT_SECONDS: Final[float] = 30.0
DEFAULT_POLL_INTERVAL_SECONDS: Final[float] = 0.5


@dataclass(frozen=True, slots=True)
class RemoteConfig:
    """Where shared rooms live and how long to wait for them to synchronise."""

    base_url: str
    sync_timeout_seconds: float = DEFAULT_SYNC_TIMEOUT_SECONDS
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS

    @classmethod
    def from_environment(cls) -> RemoteConfig:
        return get_remote_config()


def get_remote_config(*, base_url: str | None = None) -> RemoteConfig:
    """Load remote configuration; an explicit ``base_url`` wins over the environment."""

    return RemoteConfig(
        base_url=base_url or require_env_var("MAPMERGE_REMOTE_URL"),
        sync_timeout_seconds=optional_float_env(
            "MAPMERGE_SYNC_TIMEOUT", DEFAULT_SYNC_TIMEOUT_SECONDS
        ),
        poll_interval_seconds=optional_float_env(
            "MAPMERGE_POLL_INTERVAL", DEFAULT_POLL_INTERVAL_SECONDS
        ),
    )
