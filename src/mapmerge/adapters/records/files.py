"""Read and write saved map files (``{"nodes": [...], "edges": [...]}``)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from .schema import MapPayload
from .translator import map_to_record, parse_map

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from mapmerge.domain.model import Edge, Node


def load_map_file(path: Path) -> tuple[list[Node], list[Edge]]:
    payload = MapPayload.model_validate_json(path.read_text(encoding="utf-8"))
    return parse_map(payload)


def write_map_file(path: Path, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
    record = map_to_record(nodes, edges)
    path.write_text(json.dumps(record, indent=2), encoding="utf-8")
