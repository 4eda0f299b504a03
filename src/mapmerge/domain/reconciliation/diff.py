"""Diff reporter: the merge walk without the mutations.

Factors are compared in both directions; links only remote-to-local. Local
links missing from the remote map are deliberately not reported, matching the
merge path, which never looks at local-only links either.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .classify import classify_edge, classify_node
from .contracts import Classification, DiffDirection, DiffFinding, DiffReport, Subject
from .naming import link_name

if TYPE_CHECKING:
    from mapmerge.domain.model import Edge, Node
    from mapmerge.domain.ports import GraphStore

    from .events import EventEmitter
    from .snapshot import RemoteSnapshot


def diff_graphs(store: GraphStore, snapshot: RemoteSnapshot, *, emit: EventEmitter) -> DiffReport:
    """Report how ``snapshot`` differs from the local map without touching it."""

    findings: list[DiffFinding] = []

    def report(finding: DiffFinding | None) -> None:
        if finding is None:
            return
        findings.append(finding)
        emit(finding.message)

    for remote in snapshot.nodes:
        report(_node_finding(store.nodes.get(remote.id), remote))

    remote_ids = snapshot.node_ids
    for local in store.nodes.get_all(lambda node: node.id not in remote_ids):
        report(
            DiffFinding(
                subject=Subject.FACTOR,
                classification=Classification.ABSENT,
                entity_id=local.id,
                direction=DiffDirection.LOCAL_ONLY,
                message=f"Existing factor: '{local.label}' not in other map",
            )
        )

    for remote in snapshot.edges:
        report(_edge_finding(store.edges.get(remote.id), remote, snapshot=snapshot))

    return DiffReport(tuple(findings))


def _node_finding(local: Node | None, remote: Node) -> DiffFinding | None:
    classification = classify_node(local, remote)
    if local is None:
        message = f"New Factor: '{remote.label}' not in existing map"
    elif classification is Classification.LABEL_CONFLICT:
        message = (
            f"Existing Factor label: '{local.label}' does not match new label: "
            f"'{remote.label}'."
        )
    elif classification is Classification.STYLE_CONFLICT:
        message = (
            f"Existing style: '{local.group}' does not match new style: "
            f"'{remote.group}' for Factor: '{local.label}'."
        )
    else:
        return None
    return DiffFinding(
        subject=Subject.FACTOR,
        classification=classification,
        entity_id=remote.id,
        message=message,
    )


def _edge_finding(
    local: Edge | None,
    remote: Edge,
    *,
    snapshot: RemoteSnapshot,
) -> DiffFinding | None:
    classification = classify_edge(local, remote)
    name = link_name(remote, snapshot.label_for)
    if local is None:
        message = f"Existing map does not include Link: '{name}'"
    elif classification is Classification.LABEL_CONFLICT:
        message = (
            f"Existing Link label: '{local.label}' does not match new label: "
            f"'{remote.label}'."
        )
    elif classification is Classification.STYLE_CONFLICT:
        message = (
            f"Existing Link style: '{local.group}' does not match new style: "
            f"'{remote.group}' for link '{name}'."
        )
    else:
        return None
    return DiffFinding(
        subject=Subject.LINK,
        classification=classification,
        entity_id=remote.id,
        message=message,
    )
