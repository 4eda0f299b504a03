"""Logging setup for the mapmerge command line."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# HTTP client libraries log every request at INFO; room polling makes that noisy.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def _level_from_environment(default: int) -> int:
    name = os.getenv("MAPMERGE_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Route mapmerge logs to stderr.

    ``level`` wins over ``MAPMERGE_LOG_LEVEL``, which wins over INFO. Merge and
    diff messages are logged under ``mapmerge.history`` and so follow the same
    level.
    """

    effective = level if level is not None else _level_from_environment(logging.INFO)
    logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(effective, logging.WARNING))
