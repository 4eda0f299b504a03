"""Per-call state shared by the node and edge reconcilers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mapmerge.config.merge import ConflictMarker
from mapmerge.domain.ports.identifiers import new_id

from .contracts import MergeResult, Subject
from .errors import IdentifierCollisionError

if TYPE_CHECKING:
    from mapmerge.domain.model import Edge, EntityId, Node
    from mapmerge.domain.ports import EntityStore, GraphStore, IdentifierGenerator

    from .contracts import MergeAction
    from .events import EventEmitter


@dataclass(slots=True, kw_only=True)
class MergeContext:
    """Collaborators and accumulated output for one merge call.

    The context assumes exclusive access to ``store`` until the call returns.
    """

    store: GraphStore
    emit: EventEmitter
    new_id: IdentifierGenerator = new_id
    marker: ConflictMarker = field(default_factory=ConflictMarker)
    result: MergeResult = field(default_factory=MergeResult)

    def record(self, action: MergeAction) -> None:
        self.result.actions.append(action)
        self.emit(action.message)

    def fresh_node_id(self) -> EntityId:
        return self._fresh_id(self.store.nodes, Subject.FACTOR)

    def fresh_edge_id(self) -> EntityId:
        return self._fresh_id(self.store.edges, Subject.LINK)

    def _fresh_id(
        self, entities: EntityStore[Node] | EntityStore[Edge], subject: Subject
    ) -> EntityId:
        candidate = self.new_id()
        if entities.get(candidate) is not None:
            raise IdentifierCollisionError(subject=subject, entity_id=candidate)
        return candidate
