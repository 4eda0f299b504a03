"""SQLAlchemy adapter package for the local map."""

from __future__ import annotations

from .mappings import create_all_tables, factor_table, link_table, metadata
from .repositories import SqlAlchemyEdgeStore, SqlAlchemyGraphStore, SqlAlchemyNodeStore
from .unit_of_work import (
    SqlAlchemyGraphUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyEdgeStore",
    "SqlAlchemyGraphStore",
    "SqlAlchemyGraphUnitOfWork",
    "SqlAlchemyNodeStore",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "factor_table",
    "is_started",
    "link_table",
    "metadata",
    "shutdown",
    "startup",
]
