"""Shared snapshot bookkeeping for remote map sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

from mapmerge.domain.ports.remote import RemoteSourceNotReadyError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from mapmerge.domain.model import Edge, Node


class SnapshotSource(ABC):
    """Base class holding the snapshot a source delivers once it is ready."""

    def __init__(self) -> None:
        self._opened = False
        self._nodes: tuple[Node, ...] | None = None
        self._edges: tuple[Edge, ...] | None = None

    @property
    def is_open(self) -> bool:
        return self._opened

    @property
    def is_ready(self) -> bool:
        return self._nodes is not None and self._edges is not None

    def open(self) -> None:
        self._opened = True

    @abstractmethod
    def wait_until_ready(self, timeout: float | None = None) -> None: ...

    def get_nodes(self) -> Sequence[Node]:
        if self._nodes is None:
            raise RemoteSourceNotReadyError(f"{self.describe()} has not delivered a snapshot yet")
        return self._nodes

    def get_edges(self) -> Sequence[Edge]:
        if self._edges is None:
            raise RemoteSourceNotReadyError(f"{self.describe()} has not delivered a snapshot yet")
        return self._edges

    def close(self) -> None:
        self._opened = False
        self._nodes = None
        self._edges = None

    def describe(self) -> str:
        return type(self).__name__

    def _deliver(self, nodes: Sequence[Node], edges: Sequence[Edge]) -> None:
        self._nodes = tuple(nodes)
        self._edges = tuple(edges)

    def _require_open(self) -> None:
        if not self._opened:
            raise RemoteSourceNotReadyError(f"{self.describe()} is not open")

    def __enter__(self) -> Self:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
