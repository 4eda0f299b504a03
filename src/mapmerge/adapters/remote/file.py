"""Remote map read from a saved map file."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from mapmerge.adapters.records import load_map_file
from mapmerge.domain.ports.remote import RemoteSourceError

from .base import SnapshotSource

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


class JsonFileRemoteGraphSource(SnapshotSource):
    """A saved map file; the snapshot is complete as soon as the file is read."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path

    def describe(self) -> str:
        return f"map file {self.path}"

    def open(self) -> None:
        try:
            nodes, edges = load_map_file(self.path)
        except OSError as exc:
            raise RemoteSourceError(f"Cannot read {self.describe()}: {exc}") from exc
        except ValidationError as exc:
            raise RemoteSourceError(f"Malformed {self.describe()}: {exc}") from exc
        super().open()
        self._deliver(nodes, edges)
        log.info("Loaded %s: %s factors, %s links", self.describe(), len(nodes), len(edges))

    def wait_until_ready(self, timeout: float | None = None) -> None:
        del timeout
        self._require_open()
