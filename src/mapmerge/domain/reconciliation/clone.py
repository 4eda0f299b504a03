"""Construction of conflict clones and bridge links.

Every override is spelled out field by field on a copy of the remote entity;
nothing is deep-merged.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mapmerge.config.merge import ConflictMarker
    from mapmerge.domain.model import Edge, EntityId, Node


def conflict_clone(
    remote: Node,
    *,
    anchor: Node,
    clone_id: EntityId,
    marker: ConflictMarker,
) -> Node:
    """Return a copy of ``remote`` flagged as a label-conflict clone.

    The clone is placed at ``anchor``'s position plus the marker offset. When the
    local anchor has no position the remote position is used as the base, and a
    clone of an unpositioned pair stays unpositioned.
    """

    base = anchor.position or remote.position
    x, y = (None, None) if base is None else (base[0] + marker.offset_x, base[1] + marker.offset_y)
    source = remote.copy()
    return replace(
        source,
        id=clone_id,
        x=x,
        y=y,
        shape_properties=replace(source.shape_properties, border_dashes=True),
        border_width=marker.border_width,
        border_width_selected=marker.border_width,
        color=replace(
            source.color,
            border=marker.color,
            highlight=replace(source.color.highlight, border=marker.color),
        ),
    )


def bridge_edge(
    remote: Edge,
    *,
    edge_id: EntityId,
    from_id: EntityId,
    to_id: EntityId,
) -> Edge:
    """Return a dashed copy of ``remote`` connecting into cloned factors."""

    return replace(remote.rewired(from_id=from_id, to_id=to_id), id=edge_id, dashes=True)
