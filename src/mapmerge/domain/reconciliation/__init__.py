"""Reconciliation core: merge a remote causal map into the local one, or diff them.

Flow for a merge:
1) validate the remote snapshot (dangling links fail before any mutation)
2) reconcile factors, cloning label conflicts and building the remap table
3) reconcile links, bridging into clones and adding absent links

A diff walks the same classifications without mutating anything and also
reports local factors the remote map lacks.
"""

from __future__ import annotations

from .classify import classify_edge, classify_node
from .contracts import (
    ActionKind,
    Classification,
    DiffDirection,
    DiffFinding,
    DiffReport,
    MergeAction,
    MergeResult,
    RemapTable,
    Subject,
)
from .engine import MapReconciler, diff, merge
from .errors import (
    DanglingReferenceError,
    DuplicateIdentifierError,
    IdentifierCollisionError,
    ReconciliationError,
)
from .snapshot import RemoteSnapshot

__all__ = [
    "ActionKind",
    "Classification",
    "DanglingReferenceError",
    "DiffDirection",
    "DiffFinding",
    "DiffReport",
    "DuplicateIdentifierError",
    "IdentifierCollisionError",
    "MapReconciler",
    "MergeAction",
    "MergeResult",
    "ReconciliationError",
    "RemapTable",
    "RemoteSnapshot",
    "Subject",
    "classify_edge",
    "classify_node",
    "diff",
    "merge",
]
