"""Immutable, validated view of the remote map for one reconciliation pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .contracts import Subject
from .errors import DanglingReferenceError, DuplicateIdentifierError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mapmerge.domain.model import Edge, EntityId, Node


@dataclass(frozen=True, slots=True)
class RemoteSnapshot:
    """Remote factors and links, checked for internal consistency on construction.

    Validation happens before any reconciliation logic runs, so a malformed
    snapshot never leaves partial additions in the local map.
    """

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    _nodes_by_id: dict[EntityId, Node] = field(
        init=False, repr=False, compare=False, default_factory=dict["EntityId", "Node"]
    )

    def __post_init__(self) -> None:
        nodes_by_id: dict[EntityId, Node] = {}
        for node in self.nodes:
            if node.id in nodes_by_id:
                raise DuplicateIdentifierError(subject=Subject.FACTOR, entity_id=node.id)
            nodes_by_id[node.id] = node
        object.__setattr__(self, "_nodes_by_id", nodes_by_id)
        self._validate_edges()

    @classmethod
    def of(cls, nodes: Iterable[Node], edges: Iterable[Edge]) -> RemoteSnapshot:
        return cls(tuple(nodes), tuple(edges))

    @property
    def node_ids(self) -> frozenset[EntityId]:
        return frozenset(self._nodes_by_id)

    def node(self, node_id: EntityId) -> Node | None:
        return self._nodes_by_id.get(node_id)

    def label_for(self, node_id: EntityId) -> str:
        node = self._nodes_by_id.get(node_id)
        return node.label if node is not None else ""

    def _validate_edges(self) -> None:
        seen: set[EntityId] = set()
        for edge in self.edges:
            if edge.id in seen:
                raise DuplicateIdentifierError(subject=Subject.LINK, entity_id=edge.id)
            seen.add(edge.id)
            for endpoint, node_id in (("from", edge.from_id), ("to", edge.to_id)):
                if node_id not in self._nodes_by_id:
                    raise DanglingReferenceError(
                        edge_id=edge.id,
                        endpoint=endpoint,
                        node_id=node_id,
                    )
