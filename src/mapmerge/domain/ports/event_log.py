"""Port for the human-readable history of merge and diff actions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

MERGE_CATEGORY = "Merge"
DIFF_CATEGORY = "Diff"


@runtime_checkable
class EventLog(Protocol):
    """Fire-and-forget sink; implementations may fail, callers must not care."""

    def log(self, message: str, category: str) -> None: ...
