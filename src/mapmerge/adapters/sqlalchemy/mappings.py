"""SQLAlchemy table metadata for the local map."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import JSON, Column, Float, ForeignKey, Index, MetaData, String, Table

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

factor_table = Table(
    "factor",
    metadata,
    Column("id", String, primary_key=True),
    Column("label", String, nullable=False, default=""),
    Column("grp", String, nullable=False, default=""),
    Column("x", Float, nullable=True),
    Column("y", Float, nullable=True),
    Column("color_border", String, nullable=True),
    Column("color_background", String, nullable=True),
    Column("highlight_border", String, nullable=True),
    Column("highlight_background", String, nullable=True),
    Column("hover_border", String, nullable=True),
    Column("hover_background", String, nullable=True),
    Column("border_dashes", JSON, nullable=False, default=False),
    Column("shape_extra", JSON, nullable=False, default=dict),
    Column("border_width", Float, nullable=True),
    Column("border_width_selected", Float, nullable=True),
    Column("extra", JSON, nullable=False, default=dict),
)

link_table = Table(
    "link",
    metadata,
    Column("id", String, primary_key=True),
    Column("from_id", String, ForeignKey("factor.id"), nullable=False),
    Column("to_id", String, ForeignKey("factor.id"), nullable=False),
    Column("label", String, nullable=False, default=""),
    Column("grp", String, nullable=False, default=""),
    Column("dashes", JSON, nullable=False, default=False),
    Column("extra", JSON, nullable=False, default=dict),
    Index("ix_link_endpoints", "from_id", "to_id"),
)


def create_all_tables(engine: Engine) -> None:
    metadata.create_all(engine)
