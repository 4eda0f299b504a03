"""Read settings from the process environment."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import InvalidConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def _non_blank(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return every variable in ``names``; all missing ones are reported at once."""

    values = {name: _non_blank(name) for name in names}
    missing = [name for name, value in values.items() if value is None]
    if missing:
        raise MissingConfigurationError(missing)
    return {name: value for name, value in values.items() if value is not None}


def require_env_var(name: str) -> str:
    return require_env_vars([name])[name]


def optional_float_env(name: str, default: float) -> float:
    value = _non_blank(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise InvalidConfigurationError(name, value, "a number") from exc
