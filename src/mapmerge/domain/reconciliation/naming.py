"""Display names used in reconciliation messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from mapmerge.domain.model import Edge, EntityId


def link_name(edge: Edge, label_for: Callable[[EntityId], str]) -> str:
    """Return the link's label, or ``from <label> to <label>`` for unlabelled links."""

    if edge.label:
        return edge.label
    return f"from {label_for(edge.from_id)} to {label_for(edge.to_id)}"
