"""Domain port definitions for adapters."""

from __future__ import annotations

from .event_log import DIFF_CATEGORY, MERGE_CATEGORY, EventLog
from .graph_store import EntityStore, GraphStore, Predicate
from .identifiers import IdentifierGenerator, new_id
from .remote import (
    RemoteGraphSource,
    RemoteSourceError,
    RemoteSourceNotReadyError,
    RemoteSourceTimeoutError,
)
from .unit_of_work import GraphUnitOfWork

__all__ = [
    "DIFF_CATEGORY",
    "MERGE_CATEGORY",
    "EntityStore",
    "EventLog",
    "GraphStore",
    "GraphUnitOfWork",
    "IdentifierGenerator",
    "Predicate",
    "RemoteGraphSource",
    "RemoteSourceError",
    "RemoteSourceNotReadyError",
    "RemoteSourceTimeoutError",
    "new_id",
]
