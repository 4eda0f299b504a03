"""Pydantic models for saved-map and shared-room payloads.

Field names follow the map file format (``grp``, ``from``, ``shapeProperties``,
``borderWidth``...). Fields the engine does not interpret are kept as model
extras so they survive a round trip.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _coerce_id(value: object) -> object:
    # Map editors sometimes emit numeric ids.
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


def _text_or_blank(value: object) -> object:
    if value is None:
        return ""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


class MapBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ColorStatePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    border: str | None = None
    background: str | None = None


class NodeColorPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    border: str | None = None
    background: str | None = None
    highlight: ColorStatePayload | None = None
    hover: ColorStatePayload | None = None

    @model_validator(mode="before")
    @classmethod
    def _expand_plain_color(cls, value: object) -> object:
        if isinstance(value, str):
            return {"border": value, "background": value}
        return value

    @field_validator("highlight", "hover", mode="before")
    @classmethod
    def _expand_plain_state(cls, value: object) -> object:
        if isinstance(value, str):
            return {"border": value, "background": value}
        return value


class ShapePropertiesPayload(MapBaseModel):
    border_dashes: bool | list[float] = Field(default=False, alias="borderDashes")


class NodePayload(MapBaseModel):
    id: str
    label: str = ""
    grp: str = ""
    x: float | None = None
    y: float | None = None
    color: NodeColorPayload | None = None
    shape_properties: ShapePropertiesPayload | None = Field(default=None, alias="shapeProperties")
    border_width: float | None = Field(default=None, alias="borderWidth")
    border_width_selected: float | None = Field(default=None, alias="borderWidthSelected")

    _normalize_id = field_validator("id", mode="before")(_coerce_id)
    _blank_text = field_validator("label", "grp", mode="before")(_text_or_blank)


class EdgePayload(MapBaseModel):
    id: str
    from_: str = Field(alias="from")
    to: str
    label: str = ""
    grp: str = ""
    dashes: bool | list[float] = False

    _normalize_ids = field_validator("id", "from_", "to", mode="before")(_coerce_id)
    _blank_text = field_validator("label", "grp", mode="before")(_text_or_blank)


class MapPayload(MapBaseModel):
    nodes: list[NodePayload] = Field(default_factory=list["NodePayload"])
    edges: list[EdgePayload] = Field(default_factory=list["EdgePayload"])


class RoomPayload(MapPayload):
    """A shared room's state; ``nodes``/``edges`` are complete only once ``synced``."""

    synced: bool = False

    @model_validator(mode="before")
    @classmethod
    def _unwrap_room(cls, value: object) -> object:
        # Some servers nest the map under ``data``.
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            data = mapping_value.get("data")
            if isinstance(data, Mapping) and "nodes" not in mapping_value:
                merged: dict[str, object] = dict(cast(Mapping[str, object], data))
                merged["synced"] = mapping_value.get("synced", False)
                return merged
        return value
