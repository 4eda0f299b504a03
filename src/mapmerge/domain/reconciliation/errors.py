"""Reconciliation error taxonomy."""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base class for failures raised by the reconciliation core."""


class DanglingReferenceError(ReconciliationError):
    """Raised when a remote link points at a factor missing from the remote snapshot."""

    def __init__(self, *, edge_id: str, endpoint: str, node_id: str) -> None:
        super().__init__(
            f"Link {edge_id!r} references missing factor {node_id!r} at its {endpoint!r} end"
        )
        self.edge_id = edge_id
        self.endpoint = endpoint
        self.node_id = node_id


class DuplicateIdentifierError(ReconciliationError):
    """Raised when a remote snapshot holds two entities of one kind with the same id."""

    def __init__(self, *, subject: str, entity_id: str) -> None:
        super().__init__(f"Remote snapshot contains {subject} id {entity_id!r} more than once")
        self.subject = subject
        self.entity_id = entity_id


class IdentifierCollisionError(ReconciliationError):
    """Raised when the identifier generator returns an id already in the local map.

    The generator contract guarantees uniqueness; this signals a programming
    error and is never handled inside the engine.
    """

    def __init__(self, *, subject: str, entity_id: str) -> None:
        super().__init__(f"Generated {subject} id {entity_id!r} already exists in the local map")
        self.subject = subject
        self.entity_id = entity_id
