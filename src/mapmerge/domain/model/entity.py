"""Factors and links: the two entity kinds of a causal map.

Entities are immutable value objects. The reconciliation engine never edits an
entity in place; clones are produced with ``dataclasses.replace`` so every
overridden field is named explicitly.

Record fields the engine does not interpret (fonts, shapes, arrows, ...) are
kept verbatim in ``extra`` so that copies and clones carry them along.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .primitives import DashPattern, EntityId, Extra


def _new_extra() -> Extra:
    return {}


@dataclass(frozen=True, slots=True, kw_only=True)
class ColorState:
    """Border/background pair used for the highlighted and hover states."""

    border: str | None = None
    background: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NodeColor:
    border: str | None = None
    background: str | None = None
    highlight: ColorState = field(default_factory=ColorState)
    hover: ColorState = field(default_factory=ColorState)


@dataclass(frozen=True, slots=True, kw_only=True)
class ShapeProperties:
    border_dashes: DashPattern = False
    extra: Extra = field(default_factory=_new_extra)


@dataclass(frozen=True, slots=True, kw_only=True)
class Node:
    """A factor. ``group`` is the style class and has no bearing on identity."""

    id: EntityId
    label: str = ""
    group: str = ""
    x: float | None = None
    y: float | None = None
    color: NodeColor = field(default_factory=NodeColor)
    shape_properties: ShapeProperties = field(default_factory=ShapeProperties)
    border_width: float | None = None
    border_width_selected: float | None = None
    extra: Extra = field(default_factory=_new_extra)

    @property
    def position(self) -> tuple[float, float] | None:
        if self.x is None or self.y is None:
            return None
        return (self.x, self.y)

    def copy(self) -> Node:
        """Return an independent copy, including nested ``extra`` payloads."""

        return replace(
            self,
            shape_properties=replace(
                self.shape_properties,
                extra=copy.deepcopy(self.shape_properties.extra),
            ),
            extra=copy.deepcopy(self.extra),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Edge:
    """A link from one factor to another."""

    id: EntityId
    from_id: EntityId
    to_id: EntityId
    label: str = ""
    group: str = ""
    dashes: DashPattern = False
    extra: Extra = field(default_factory=_new_extra)

    @property
    def endpoints(self) -> tuple[EntityId, EntityId]:
        return (self.from_id, self.to_id)

    def copy(self) -> Edge:
        return replace(self, extra=copy.deepcopy(self.extra))

    def rewired(self, *, from_id: EntityId, to_id: EntityId) -> Edge:
        """Return a copy with rewired endpoint IDs."""

        return replace(self.copy(), from_id=from_id, to_id=to_id)
