"""Styling applied to entities created while merging maps."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from .errors import InvalidConfigurationError

DEFAULT_CONFLICT_COLOR: Final[str] = "#ff0000"
DEFAULT_CONFLICT_BORDER_WIDTH: Final[int] = 4
DEFAULT_CLONE_OFFSET: Final[tuple[float, float]] = (30.0, 30.0)


@dataclass(frozen=True, slots=True)
class ConflictMarker:
    """How a factor cloned on a label conflict is made to stand out."""

    color: str = DEFAULT_CONFLICT_COLOR
    border_width: int = DEFAULT_CONFLICT_BORDER_WIDTH
    offset_x: float = DEFAULT_CLONE_OFFSET[0]
    offset_y: float = DEFAULT_CLONE_OFFSET[1]


def _parse_offset(value: str) -> tuple[float, float]:
    parts = [part.strip() for part in value.split(",")]
    try:
        x, y = (float(part) for part in parts)
    except ValueError as exc:
        raise InvalidConfigurationError(
            "MAPMERGE_CLONE_OFFSET", value, "two numbers 'x,y'"
        ) from exc
    return x, y


def get_conflict_marker() -> ConflictMarker:
    color = os.getenv("MAPMERGE_CONFLICT_COLOR") or DEFAULT_CONFLICT_COLOR
    raw_offset = os.getenv("MAPMERGE_CLONE_OFFSET")
    offset_x, offset_y = _parse_offset(raw_offset) if raw_offset else DEFAULT_CLONE_OFFSET
    return ConflictMarker(color=color, offset_x=offset_x, offset_y=offset_y)
