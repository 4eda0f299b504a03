"""Shared reconciliation contract components.

This module intentionally holds only:
- the classification enum and remap-table alias
- result dataclasses returned by the merge and diff entry points
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mapmerge.domain.model import EntityId


type RemapTable = dict[EntityId, EntityId]


class Classification(StrEnum):
    """Relationship between a remote entity and its local namesake."""

    ABSENT = "absent"
    IDENTICAL = "identical"
    LABEL_CONFLICT = "label_conflict"
    STYLE_CONFLICT = "style_conflict"


class Subject(StrEnum):
    FACTOR = "factor"
    LINK = "link"


class ActionKind(StrEnum):
    """What a merge did about one remote entity."""

    ADDED = "added"
    CLONED = "cloned"
    BRIDGED = "bridged"
    RETAINED = "retained"


@dataclass(frozen=True, slots=True, kw_only=True)
class MergeAction:
    """One logged merge decision.

    ``created_id`` is set for every action that added an entity to the local map.
    ``classification`` is ``None`` for bridge links, which are driven by the remap
    table rather than by classifying the link itself.
    """

    kind: ActionKind
    subject: Subject
    source_id: EntityId
    message: str
    classification: Classification | None = None
    created_id: EntityId | None = None


@dataclass(slots=True)
class MergeResult:
    """Summary of one merge call."""

    remap: RemapTable = field(default_factory=dict["EntityId", "EntityId"])
    actions: list[MergeAction] = field(default_factory=list["MergeAction"])

    def _created(self, kind: ActionKind, subject: Subject) -> tuple[EntityId, ...]:
        return tuple(
            action.created_id
            for action in self.actions
            if action.kind is kind and action.subject is subject and action.created_id
        )

    @property
    def added_nodes(self) -> tuple[EntityId, ...]:
        return self._created(ActionKind.ADDED, Subject.FACTOR)

    @property
    def cloned_nodes(self) -> tuple[EntityId, ...]:
        return self._created(ActionKind.CLONED, Subject.FACTOR)

    @property
    def added_edges(self) -> tuple[EntityId, ...]:
        return self._created(ActionKind.ADDED, Subject.LINK)

    @property
    def bridge_edges(self) -> tuple[EntityId, ...]:
        return self._created(ActionKind.BRIDGED, Subject.LINK)

    @property
    def notices(self) -> tuple[str, ...]:
        return tuple(
            action.message for action in self.actions if action.kind is ActionKind.RETAINED
        )

    @property
    def mutations(self) -> int:
        return sum(1 for action in self.actions if action.created_id is not None)


class DiffDirection(StrEnum):
    """Which map holds the entity a finding is about."""

    REMOTE = "remote"
    LOCAL_ONLY = "local_only"


@dataclass(frozen=True, slots=True, kw_only=True)
class DiffFinding:
    subject: Subject
    classification: Classification
    entity_id: EntityId
    message: str
    direction: DiffDirection = DiffDirection.REMOTE


@dataclass(frozen=True, slots=True)
class DiffReport:
    """Read-only discrepancies between the local map and a remote snapshot."""

    findings: tuple[DiffFinding, ...] = ()

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(finding.message for finding in self.findings)

    def for_subject(self, subject: Subject) -> tuple[DiffFinding, ...]:
        return tuple(finding for finding in self.findings if finding.subject is subject)

    def __bool__(self) -> bool:
        return bool(self.findings)

    def __len__(self) -> int:
        return len(self.findings)
