"""Dictionary-backed graph store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mapmerge.domain.model import Edge, Node

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from mapmerge.domain.model import EntityId
    from mapmerge.domain.ports import Predicate


class InMemoryEntityStore[TEntity: (Node, Edge)]:
    """Insertion-ordered store keyed by entity id."""

    def __init__(self, entities: Iterable[TEntity] = ()) -> None:
        self._entities: dict[EntityId, TEntity] = {}
        for entity in entities:
            self.add(entity)

    def get(self, entity_id: EntityId) -> TEntity | None:
        return self._entities.get(entity_id)

    def get_all(self, predicate: Predicate[TEntity] | None = None) -> Sequence[TEntity]:
        if predicate is None:
            return tuple(self._entities.values())
        return tuple(entity for entity in self._entities.values() if predicate(entity))

    def add(self, entity: TEntity) -> None:
        if entity.id in self._entities:
            raise ValueError(f"Entity {entity.id!r} already exists")
        self._entities[entity.id] = entity

    def update(self, entity: TEntity) -> None:
        if entity.id not in self._entities:
            raise KeyError(entity.id)
        self._entities[entity.id] = entity

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities


class InMemoryGraphStore:
    def __init__(self, nodes: Iterable[Node] = (), edges: Iterable[Edge] = ()) -> None:
        self._nodes = InMemoryEntityStore[Node](nodes)
        self._edges = InMemoryEntityStore[Edge](edges)

    @property
    def nodes(self) -> InMemoryEntityStore[Node]:
        return self._nodes

    @property
    def edges(self) -> InMemoryEntityStore[Edge]:
        return self._edges
