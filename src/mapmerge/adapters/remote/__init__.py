"""Remote map sources."""

from __future__ import annotations

from .base import SnapshotSource
from .file import JsonFileRemoteGraphSource
from .rooms import HttpRemoteGraphSource

__all__ = [
    "HttpRemoteGraphSource",
    "JsonFileRemoteGraphSource",
    "SnapshotSource",
]
