"""Graph store implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, insert, select, update

from mapmerge.adapters.records.translator import as_dash_pattern
from mapmerge.domain.model import ColorState, Edge, Node, NodeColor, ShapeProperties

from .mappings import factor_table, link_table

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from sqlalchemy import Table
    from sqlalchemy.orm import Session

    from mapmerge.domain.model import DashPattern, EntityId
    from mapmerge.domain.ports import Predicate


def _dashes_to_column(value: DashPattern) -> bool | list[float]:
    return list(value) if isinstance(value, tuple) else value


class SqlAlchemyEntityStore[TEntity: (Node, Edge)](ABC):
    """Shared row plumbing; subclasses translate rows to entities and back."""

    table: Table

    def __init__(self, session: Session) -> None:
        self.session = session

    @abstractmethod
    def _from_row(self, row: Mapping[str, Any]) -> TEntity: ...

    @abstractmethod
    def _to_row(self, entity: TEntity) -> dict[str, object]: ...

    def get(self, entity_id: EntityId) -> TEntity | None:
        stmt = select(self.table).where(self.table.c.id == entity_id)
        row = self.session.execute(stmt).mappings().one_or_none()
        return self._from_row(row) if row is not None else None

    def get_all(self, predicate: Predicate[TEntity] | None = None) -> Sequence[TEntity]:
        stmt = select(self.table).order_by(self.table.c.id)
        entities = [self._from_row(row) for row in self.session.execute(stmt).mappings()]
        if predicate is None:
            return entities
        return [entity for entity in entities if predicate(entity)]

    def add(self, entity: TEntity) -> None:
        self.session.execute(insert(self.table).values(**self._to_row(entity)))

    def update(self, entity: TEntity) -> None:
        values = self._to_row(entity)
        values.pop("id")
        stmt = update(self.table).where(self.table.c.id == entity.id).values(**values)
        result = self.session.execute(stmt)
        if result.rowcount == 0:  # pyright: ignore[reportAttributeAccessIssue]
            raise KeyError(entity.id)

    def __len__(self) -> int:
        stmt = select(func.count()).select_from(self.table)
        return self.session.execute(stmt).scalar_one()


class SqlAlchemyNodeStore(SqlAlchemyEntityStore[Node]):
    table = factor_table

    def _from_row(self, row: Mapping[str, Any]) -> Node:
        return Node(
            id=row["id"],
            label=row["label"],
            group=row["grp"],
            x=row["x"],
            y=row["y"],
            color=NodeColor(
                border=row["color_border"],
                background=row["color_background"],
                highlight=ColorState(
                    border=row["highlight_border"],
                    background=row["highlight_background"],
                ),
                hover=ColorState(border=row["hover_border"], background=row["hover_background"]),
            ),
            shape_properties=ShapeProperties(
                border_dashes=as_dash_pattern(row["border_dashes"]),
                extra=dict(row["shape_extra"] or {}),
            ),
            border_width=row["border_width"],
            border_width_selected=row["border_width_selected"],
            extra=dict(row["extra"] or {}),
        )

    def _to_row(self, entity: Node) -> dict[str, object]:
        return {
            "id": entity.id,
            "label": entity.label,
            "grp": entity.group,
            "x": entity.x,
            "y": entity.y,
            "color_border": entity.color.border,
            "color_background": entity.color.background,
            "highlight_border": entity.color.highlight.border,
            "highlight_background": entity.color.highlight.background,
            "hover_border": entity.color.hover.border,
            "hover_background": entity.color.hover.background,
            "border_dashes": _dashes_to_column(entity.shape_properties.border_dashes),
            "shape_extra": dict(entity.shape_properties.extra),
            "border_width": entity.border_width,
            "border_width_selected": entity.border_width_selected,
            "extra": dict(entity.extra),
        }


class SqlAlchemyEdgeStore(SqlAlchemyEntityStore[Edge]):
    table = link_table

    def _from_row(self, row: Mapping[str, Any]) -> Edge:
        return Edge(
            id=row["id"],
            from_id=row["from_id"],
            to_id=row["to_id"],
            label=row["label"],
            group=row["grp"],
            dashes=as_dash_pattern(row["dashes"]),
            extra=dict(row["extra"] or {}),
        )

    def _to_row(self, entity: Edge) -> dict[str, object]:
        return {
            "id": entity.id,
            "from_id": entity.from_id,
            "to_id": entity.to_id,
            "label": entity.label,
            "grp": entity.group,
            "dashes": _dashes_to_column(entity.dashes),
            "extra": dict(entity.extra),
        }


class SqlAlchemyGraphStore:
    """Local map stored in the ``factor`` and ``link`` tables of one session."""

    def __init__(self, session: Session) -> None:
        self._nodes = SqlAlchemyNodeStore(session)
        self._edges = SqlAlchemyEdgeStore(session)

    @property
    def nodes(self) -> SqlAlchemyNodeStore:
        return self._nodes

    @property
    def edges(self) -> SqlAlchemyEdgeStore:
        return self._edges
