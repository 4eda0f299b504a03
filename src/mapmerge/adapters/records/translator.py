"""Translate map-file records to domain factors/links and back."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, cast

from mapmerge.domain.model import ColorState, Edge, Node, NodeColor, ShapeProperties

from .schema import EdgePayload, MapPayload, NodePayload

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mapmerge.domain.model import DashPattern

    from .schema import ColorStatePayload, NodeColorPayload, ShapePropertiesPayload


def as_dash_pattern(value: object) -> DashPattern:
    if isinstance(value, list | tuple):
        items = cast("list[object] | tuple[object, ...]", value)
        return tuple(float(cast("float", item)) for item in items)
    return bool(value)


def _dash_to_record(value: DashPattern) -> bool | list[float]:
    return list(value) if isinstance(value, tuple) else value


def node_from_payload(payload: NodePayload) -> Node:
    return Node(
        id=payload.id,
        label=payload.label,
        group=payload.grp,
        x=payload.x,
        y=payload.y,
        color=_color_from_payload(payload.color),
        shape_properties=_shape_from_payload(payload.shape_properties),
        border_width=payload.border_width,
        border_width_selected=payload.border_width_selected,
        extra=dict(payload.model_extra or {}),
    )


def edge_from_payload(payload: EdgePayload) -> Edge:
    return Edge(
        id=payload.id,
        from_id=payload.from_,
        to_id=payload.to,
        label=payload.label,
        group=payload.grp,
        dashes=as_dash_pattern(payload.dashes),
        extra=dict(payload.model_extra or {}),
    )


def parse_map(payload: MapPayload) -> tuple[list[Node], list[Edge]]:
    nodes = [node_from_payload(node) for node in payload.nodes]
    edges = [edge_from_payload(edge) for edge in payload.edges]
    return nodes, edges


def _state_from_payload(payload: ColorStatePayload | None) -> ColorState:
    if payload is None:
        return ColorState()
    return ColorState(border=payload.border, background=payload.background)


def _color_from_payload(payload: NodeColorPayload | None) -> NodeColor:
    if payload is None:
        return NodeColor()
    return NodeColor(
        border=payload.border,
        background=payload.background,
        highlight=_state_from_payload(payload.highlight),
        hover=_state_from_payload(payload.hover),
    )


def _shape_from_payload(payload: ShapePropertiesPayload | None) -> ShapeProperties:
    if payload is None:
        return ShapeProperties()
    return ShapeProperties(
        border_dashes=as_dash_pattern(payload.border_dashes),
        extra=dict(payload.model_extra or {}),
    )


def node_to_record(node: Node) -> dict[str, object]:
    record: dict[str, object] = copy.deepcopy(node.extra)
    record["id"] = node.id
    record["label"] = node.label
    if node.group:
        record["grp"] = node.group
    if node.x is not None:
        record["x"] = node.x
    if node.y is not None:
        record["y"] = node.y

    color = _color_to_record(node.color)
    if color:
        record["color"] = color

    shape: dict[str, object] = copy.deepcopy(node.shape_properties.extra)
    if node.shape_properties.border_dashes or shape:
        shape["borderDashes"] = _dash_to_record(node.shape_properties.border_dashes)
        record["shapeProperties"] = shape

    if node.border_width is not None:
        record["borderWidth"] = node.border_width
    if node.border_width_selected is not None:
        record["borderWidthSelected"] = node.border_width_selected
    return record


def edge_to_record(edge: Edge) -> dict[str, object]:
    record: dict[str, object] = copy.deepcopy(edge.extra)
    record["id"] = edge.id
    record["from"] = edge.from_id
    record["to"] = edge.to_id
    if edge.label:
        record["label"] = edge.label
    if edge.group:
        record["grp"] = edge.group
    if edge.dashes:
        record["dashes"] = _dash_to_record(edge.dashes)
    return record


def map_to_record(nodes: Iterable[Node], edges: Iterable[Edge]) -> dict[str, object]:
    return {
        "nodes": [node_to_record(node) for node in nodes],
        "edges": [edge_to_record(edge) for edge in edges],
    }


def _state_to_record(state: ColorState) -> dict[str, str]:
    record: dict[str, str] = {}
    if state.border is not None:
        record["border"] = state.border
    if state.background is not None:
        record["background"] = state.background
    return record


def _color_to_record(color: NodeColor) -> dict[str, object]:
    record: dict[str, object] = {}
    if color.border is not None:
        record["border"] = color.border
    if color.background is not None:
        record["background"] = color.background
    for name, state in (("highlight", color.highlight), ("hover", color.hover)):
        state_record = _state_to_record(state)
        if state_record:
            record[name] = state_record
    return record
