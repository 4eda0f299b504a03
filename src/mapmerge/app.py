"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from mapmerge.adapters.records import write_map_file
from mapmerge.adapters.remote import HttpRemoteGraphSource, JsonFileRemoteGraphSource
from mapmerge.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyGraphUnitOfWork,
    is_started,
    startup,
)
from mapmerge.config.merge import get_conflict_marker
from mapmerge.config.remote import get_remote_config
from mapmerge.domain.ports.unit_of_work import GraphUnitOfWork
from mapmerge.domain.reconciliation import MapReconciler, RemoteSnapshot

if TYPE_CHECKING:
    from pathlib import Path

    from mapmerge.adapters.remote import SnapshotSource
    from mapmerge.config.merge import ConflictMarker
    from mapmerge.domain.ports import EventLog, RemoteGraphSource
    from mapmerge.domain.reconciliation import DiffReport, MergeResult

UnitOfWorkFactory = Callable[[], GraphUnitOfWork]


log = getLogger(__name__)


def open_remote_source(
    *,
    file: Path | None = None,
    room: str | None = None,
    url: str | None = None,
) -> SnapshotSource:
    """Build the remote source for a saved map file or a shared room."""

    if (file is None) == (room is None):
        raise ValueError("Exactly one of file or room must be given")
    if room is None:
        return JsonFileRemoteGraphSource(file)  # pyright: ignore[reportArgumentType]
    return HttpRemoteGraphSource(room, config=get_remote_config(base_url=url))


def _resolve_unit_of_work(factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if factory is not None:
        return factory
    if not is_started():
        startup()
    return SqlAlchemyGraphUnitOfWork


def _take_snapshot(source: RemoteGraphSource, timeout: float | None) -> RemoteSnapshot:
    source.wait_until_ready(timeout)
    return RemoteSnapshot.of(source.get_nodes(), source.get_edges())


def merge_remote_map(
    source: RemoteGraphSource,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    event_log: EventLog | None = None,
    marker: ConflictMarker | None = None,
    timeout: float | None = None,
) -> MergeResult:
    """Merge the remote map into the local one and commit the additions."""

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    effective_marker = marker or get_conflict_marker()
    with source:
        snapshot = _take_snapshot(source, timeout)
    log.info(
        "Starting merge: remote factors=%s, remote links=%s",
        len(snapshot.nodes),
        len(snapshot.edges),
    )

    with effective_uow() as uow:
        reconciler = MapReconciler(store=uow.graph, event_log=event_log, marker=effective_marker)
        result = reconciler.merge(snapshot)
        uow.commit()

    log.info("Finished merge: %s change(s), %s notice(s)", result.mutations, len(result.notices))
    return result


def diff_remote_map(
    source: RemoteGraphSource,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    event_log: EventLog | None = None,
    timeout: float | None = None,
) -> DiffReport:
    """Compare the remote map with the local one without changing either."""

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    with source:
        snapshot = _take_snapshot(source, timeout)

    with effective_uow() as uow:
        report = MapReconciler(store=uow.graph, event_log=event_log).diff(snapshot)
        uow.rollback()

    return report


def export_map_file(
    path: Path,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> tuple[int, int]:
    """Write the local map to ``path`` in the saved-map format."""

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    with effective_uow() as uow:
        nodes = uow.graph.nodes.get_all()
        edges = uow.graph.edges.get_all()
    write_map_file(path, nodes, edges)
    log.info("Exported %s factors and %s links to %s", len(nodes), len(edges), path)
    return len(nodes), len(edges)
