"""Edge reconciler: bring remote links into the local map.

Each remote link goes through two independent steps:

1. endpoint rewriting: a link touching a cloned factor is copied as a dashed
   bridge link with a fresh id, pointing at the clone(s);
2. direct classification of the link's own id against the local map.

Both steps can add a link for the same remote link. A bridged link whose id
is also absent locally therefore yields two additions: the bridge into the
clone(s) and the unmodified link between the original factors.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .classify import classify_edge
from .clone import bridge_edge
from .contracts import ActionKind, Classification, MergeAction, Subject
from .naming import link_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mapmerge.domain.model import Edge, EntityId

    from .context import MergeContext
    from .contracts import RemapTable
    from .snapshot import RemoteSnapshot

log = getLogger(__name__)


def reconcile_edges(
    context: MergeContext,
    remote_edges: Iterable[Edge],
    remap: RemapTable,
    *,
    snapshot: RemoteSnapshot,
) -> None:
    """Merge ``remote_edges`` into the local map, honouring ``remap``."""

    for remote in remote_edges:
        endpoints = rewired_endpoints(remote, remap)
        if endpoints is not None:
            _add_bridge(context, remote, endpoints)
        _reconcile_direct(context, remote, snapshot=snapshot)


def rewired_endpoints(edge: Edge, remap: RemapTable) -> tuple[EntityId, EntityId] | None:
    """Return ``(from, to)`` rewritten through ``remap``, or ``None`` if untouched."""

    if edge.from_id in remap:
        return remap[edge.from_id], remap.get(edge.to_id, edge.to_id)
    if edge.to_id in remap:
        return edge.from_id, remap[edge.to_id]
    return None


def _add_bridge(
    context: MergeContext,
    remote: Edge,
    endpoints: tuple[EntityId, EntityId],
) -> None:
    from_id, to_id = endpoints
    bridge = bridge_edge(
        remote,
        edge_id=context.fresh_edge_id(),
        from_id=from_id,
        to_id=to_id,
    )
    context.store.edges.add(bridge)
    log.debug("Link %s bridged as %s (%s -> %s)", remote.id, bridge.id, from_id, to_id)
    context.record(
        MergeAction(
            kind=ActionKind.BRIDGED,
            subject=Subject.LINK,
            source_id=remote.id,
            created_id=bridge.id,
            message=(
                f"Added Link between new Factor(s): {_local_label(context, from_id)} "
                f"to {_local_label(context, to_id)}"
            ),
        )
    )


def _reconcile_direct(context: MergeContext, remote: Edge, *, snapshot: RemoteSnapshot) -> None:
    local = context.store.edges.get(remote.id)
    classification = classify_edge(local, remote)
    log.debug("Link %s classified as %s", remote.id, classification)
    name = link_name(remote, snapshot.label_for)

    if local is None:
        context.store.edges.add(remote.copy())
        context.record(
            MergeAction(
                kind=ActionKind.ADDED,
                subject=Subject.LINK,
                source_id=remote.id,
                classification=classification,
                created_id=remote.id,
                message=f"Added new Link: '{name}'",
            )
        )
    elif classification is Classification.LABEL_CONFLICT:
        context.record(
            MergeAction(
                kind=ActionKind.RETAINED,
                subject=Subject.LINK,
                source_id=remote.id,
                classification=classification,
                message=(
                    f"Existing Link label: '{local.label}' does not match new label: "
                    f"'{remote.label}'. Existing label retained."
                ),
            )
        )
    elif classification is Classification.STYLE_CONFLICT:
        context.record(
            MergeAction(
                kind=ActionKind.RETAINED,
                subject=Subject.LINK,
                source_id=remote.id,
                classification=classification,
                message=(
                    f"Existing Link style: '{local.group}' does not match new style: "
                    f"'{remote.group}' for link '{name}'. Existing style retained."
                ),
            )
        )


def _local_label(context: MergeContext, node_id: EntityId) -> str:
    node = context.store.nodes.get(node_id)
    return node.label if node is not None else node_id
