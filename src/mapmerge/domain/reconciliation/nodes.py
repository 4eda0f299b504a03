"""Node reconciler: bring remote factors into the local map."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .classify import classify_node
from .clone import conflict_clone
from .contracts import ActionKind, Classification, MergeAction, Subject

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mapmerge.domain.model import Node

    from .context import MergeContext
    from .contracts import RemapTable

log = getLogger(__name__)


def reconcile_nodes(context: MergeContext, remote_nodes: Iterable[Node]) -> RemapTable:
    """Merge ``remote_nodes`` into the local map and return the remap table.

    - absent factors are added unchanged
    - label conflicts are cloned with a fresh id and conflict styling
    - style conflicts are reported, the local style is kept
    - identical factors are left alone

    The returned table maps exactly the remote ids that were cloned by this call.
    """

    remap: RemapTable = context.result.remap
    nodes = context.store.nodes
    for remote in remote_nodes:
        local = nodes.get(remote.id)
        classification = classify_node(local, remote)
        log.debug("Factor %s classified as %s", remote.id, classification)

        if local is None:
            nodes.add(remote.copy())
            context.record(
                MergeAction(
                    kind=ActionKind.ADDED,
                    subject=Subject.FACTOR,
                    source_id=remote.id,
                    classification=classification,
                    created_id=remote.id,
                    message=f"Added new Factor: '{remote.label}'",
                )
            )
        elif classification is Classification.LABEL_CONFLICT:
            clone = conflict_clone(
                remote,
                anchor=local,
                clone_id=context.fresh_node_id(),
                marker=context.marker,
            )
            nodes.add(clone)
            remap[remote.id] = clone.id
            context.record(
                MergeAction(
                    kind=ActionKind.CLONED,
                    subject=Subject.FACTOR,
                    source_id=remote.id,
                    classification=classification,
                    created_id=clone.id,
                    message=(
                        f"Existing Factor label: '{local.label}' does not match new label: "
                        f"'{remote.label}'. Factor with new label added."
                    ),
                )
            )
        elif classification is Classification.STYLE_CONFLICT:
            context.record(
                MergeAction(
                    kind=ActionKind.RETAINED,
                    subject=Subject.FACTOR,
                    source_id=remote.id,
                    classification=classification,
                    message=(
                        f"Existing style: '{local.group}' does not match new style: "
                        f"'{remote.group}' for Factor: '{local.label}'. Existing style retained."
                    ),
                )
            )
    return remap
