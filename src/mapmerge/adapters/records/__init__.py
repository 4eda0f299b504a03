"""Map-file record format shared by file exports, remote rooms and the CLI."""

from __future__ import annotations

from .files import load_map_file, write_map_file
from .schema import EdgePayload, MapPayload, NodePayload, RoomPayload
from .translator import (
    edge_from_payload,
    edge_to_record,
    map_to_record,
    node_from_payload,
    node_to_record,
    parse_map,
)

__all__ = [
    "EdgePayload",
    "MapPayload",
    "NodePayload",
    "RoomPayload",
    "edge_from_payload",
    "edge_to_record",
    "load_map_file",
    "map_to_record",
    "node_from_payload",
    "node_to_record",
    "parse_map",
    "write_map_file",
]
