"""Map domain model: factors (nodes) and links (edges)."""

from __future__ import annotations

from .entity import ColorState, Edge, Node, NodeColor, ShapeProperties
from .primitives import DashPattern, EntityId, Extra

type Entity = Node | Edge

__all__ = [
    "ColorState",
    "DashPattern",
    "Edge",
    "Entity",
    "EntityId",
    "Extra",
    "Node",
    "NodeColor",
    "ShapeProperties",
]
