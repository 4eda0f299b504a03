"""Domain primitives: scalar aliases shared by factors and links."""

from __future__ import annotations

type EntityId = str
type DashPattern = bool | tuple[float, ...]
type Extra = dict[str, object]
