"""Unit-of-work boundary around the local map."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from .graph_store import GraphStore


@runtime_checkable
class GraphUnitOfWork(Protocol):
    """Transaction around one ``GraphStore``; merges commit, diffs never do."""

    @property
    def graph(self) -> GraphStore: ...

    def __enter__(self) -> GraphUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
