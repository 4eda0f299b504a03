"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_float_env, require_env_var, require_env_vars
from .errors import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .http_resilience import HttpClientConfig, RateLimit, RetryPolicy
from .merge import ConflictMarker, get_conflict_marker
from .remote import RemoteConfig, get_remote_config

__all__ = [
    "ConfigurationError",
    "ConflictMarker",
    "HttpClientConfig",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "RemoteConfig",
    "RetryPolicy",
    "get_conflict_marker",
    "get_remote_config",
    "optional_float_env",
    "require_env_var",
    "require_env_vars",
]
