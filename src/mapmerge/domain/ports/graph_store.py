"""Ports for the local map store the reconciliation engine reads and extends."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from mapmerge.domain.model import Edge, Node

if TYPE_CHECKING:
    from mapmerge.domain.model import EntityId


type Predicate[T] = Callable[[T], bool]


@runtime_checkable
class EntityStore[TEntity](Protocol):
    """Identifier-keyed collection of one entity kind."""

    def get(self, entity_id: EntityId) -> TEntity | None: ...

    def get_all(self, predicate: Predicate[TEntity] | None = None) -> Sequence[TEntity]: ...

    def add(self, entity: TEntity) -> None: ...

    def update(self, entity: TEntity) -> None: ...


@runtime_checkable
class GraphStore(Protocol):
    """Canonical local map: one store for factors, one for links."""

    @property
    def nodes(self) -> EntityStore[Node]: ...

    @property
    def edges(self) -> EntityStore[Edge]: ...
