"""Where the local map database lives."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "mapmerge"
DEFAULT_DB_FILENAME: Final[str] = "mapmerge.db"


def _platform_data_home() -> Path:
    if os.name == "nt":
        local_app_data = os.getenv("LOCALAPPDATA")
        return Path(local_app_data) if local_app_data else Path.home() / "AppData" / "Local"
    xdg_data_home = os.getenv("XDG_DATA_HOME")
    return Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"


def get_data_dir() -> Path:
    """``MAPMERGE_DATA_DIR`` if set, else a ``mapmerge`` folder in the user data home."""

    override = os.getenv("MAPMERGE_DATA_DIR")
    base = Path(override) if override else _platform_data_home() / APP_DIR_NAME
    return base.expanduser().resolve()


def ensure_data_dir(path: Path | None = None) -> Path:
    data_dir = get_data_dir() if path is None else path
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_database_path() -> Path:
    return ensure_data_dir() / DEFAULT_DB_FILENAME


def get_database_uri() -> str:
    """SQLAlchemy URI of the local map; ``DATABASE_URI`` replaces the SQLite default."""

    return os.getenv("DATABASE_URI") or f"sqlite+pysqlite:///{get_database_path()}"
