"""Entry points for merging a remote map into the local one and diffing them.

``MapReconciler`` bundles the collaborators (store, event log, identifier
generator, conflict styling). ``merge`` and ``diff`` are one-shot helpers that
build a validated snapshot from raw node/edge sequences first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from mapmerge.config.merge import ConflictMarker
from mapmerge.domain.ports.event_log import DIFF_CATEGORY, MERGE_CATEGORY
from mapmerge.domain.ports.identifiers import new_id as default_new_id

from .context import MergeContext
from .diff import diff_graphs
from .edges import reconcile_edges
from .events import EventEmitter
from .nodes import reconcile_nodes
from .snapshot import RemoteSnapshot

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mapmerge.domain.model import Edge, Node
    from mapmerge.domain.ports import EventLog, GraphStore, IdentifierGenerator

    from .contracts import DiffReport, MergeResult

log = getLogger(__name__)


@dataclass(slots=True, kw_only=True)
class MapReconciler:
    """Run merges and diffs of remote snapshots against one local store."""

    store: GraphStore
    event_log: EventLog | None = None
    new_id: IdentifierGenerator = default_new_id
    marker: ConflictMarker = field(default_factory=ConflictMarker)

    def merge(self, snapshot: RemoteSnapshot) -> MergeResult:
        """Add the snapshot's factors and links to the store; never removes or edits."""

        context = MergeContext(
            store=self.store,
            emit=EventEmitter(self.event_log, MERGE_CATEGORY),
            new_id=self.new_id,
            marker=self.marker,
        )
        remap = reconcile_nodes(context, snapshot.nodes)
        reconcile_edges(context, snapshot.edges, remap, snapshot=snapshot)
        result = context.result
        log.info(
            "Merge finished: factors added=%s, cloned=%s; links added=%s, bridged=%s",
            len(result.added_nodes),
            len(result.cloned_nodes),
            len(result.added_edges),
            len(result.bridge_edges),
        )
        return result

    def diff(self, snapshot: RemoteSnapshot) -> DiffReport:
        report = diff_graphs(
            self.store,
            snapshot,
            emit=EventEmitter(self.event_log, DIFF_CATEGORY),
        )
        log.info("Diff finished: %s finding(s)", len(report))
        return report


def merge(
    local_graph: GraphStore,
    remote_nodes: Iterable[Node],
    remote_edges: Iterable[Edge],
    *,
    event_log: EventLog | None = None,
    new_id: IdentifierGenerator | None = None,
    marker: ConflictMarker | None = None,
) -> MergeResult:
    """Merge remote factors and links into ``local_graph``.

    Raises ``DanglingReferenceError`` before touching ``local_graph`` when a
    remote link references a factor missing from ``remote_nodes``.
    """

    snapshot = RemoteSnapshot.of(remote_nodes, remote_edges)
    reconciler = MapReconciler(
        store=local_graph,
        event_log=event_log,
        new_id=new_id or default_new_id,
        marker=marker or ConflictMarker(),
    )
    return reconciler.merge(snapshot)


def diff(
    local_graph: GraphStore,
    remote_nodes: Iterable[Node],
    remote_edges: Iterable[Edge],
    *,
    event_log: EventLog | None = None,
) -> DiffReport:
    """Report differences between ``local_graph`` and the remote map, read-only."""

    snapshot = RemoteSnapshot.of(remote_nodes, remote_edges)
    return MapReconciler(store=local_graph, event_log=event_log).diff(snapshot)
