"""Conflict classification of a remote entity against its local namesake."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .contracts import Classification

if TYPE_CHECKING:
    from mapmerge.domain.model import Edge, Node


def classify_node(local: Node | None, remote: Node) -> Classification:
    return _classify(local, remote)


def classify_edge(local: Edge | None, remote: Edge) -> Classification:
    return _classify(local, remote)


def _classify(local: Node | Edge | None, remote: Node | Edge) -> Classification:
    # Priority: existence, then label (exact, case-sensitive), then style class.
    if local is None:
        return Classification.ABSENT
    if local.label != remote.label:
        return Classification.LABEL_CONFLICT
    if local.group != remote.group:
        return Classification.STYLE_CONFLICT
    return Classification.IDENTICAL
