from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from mapmerge import app
from mapmerge.adapters.event_log import HistoryEventLog
from mapmerge.adapters.remote import HttpRemoteGraphSource, JsonFileRemoteGraphSource
from mapmerge.config import ConflictMarker
from mapmerge.domain.ports import DIFF_CATEGORY, MERGE_CATEGORY
from mapmerge.domain.reconciliation import DanglingReferenceError
from tests.helpers.maps import (
    FakeGraphUnitOfWork,
    StaticRemoteSource,
    make_edge,
    make_graph,
    make_node,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from mapmerge.adapters.sqlalchemy import SqlAlchemyGraphUnitOfWork


def test_open_remote_source_picks_file_or_room(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("MAPMERGE_REMOTE_URL", raising=False)

    file_source = app.open_remote_source(file=tmp_path / "map.json")
    room_source = app.open_remote_source(room="ABC123", url="https://rooms.example")

    assert isinstance(file_source, JsonFileRemoteGraphSource)
    assert isinstance(room_source, HttpRemoteGraphSource)
    assert room_source.config.base_url == "https://rooms.example"


def test_open_remote_source_needs_exactly_one_origin(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Exactly one"):
        app.open_remote_source()
    with pytest.raises(ValueError, match="Exactly one"):
        app.open_remote_source(file=tmp_path / "map.json", room="ABC123")


def test_merge_remote_map_commits_additions() -> None:
    uow = FakeGraphUnitOfWork(make_graph([make_node("n1", "Cost")]))
    source = StaticRemoteSource(
        [make_node("n1", "Cost"), make_node("n2", "Demand")],
        [make_edge("e1", "n1", "n2")],
    )
    history = HistoryEventLog()

    result = app.merge_remote_map(
        source,
        unit_of_work_factory=lambda: uow,
        event_log=history,
        marker=ConflictMarker(),
        timeout=2.5,
    )

    assert result.added_nodes == ("n2",)
    assert result.added_edges == ("e1",)
    assert uow.committed == 1
    assert source.waited_with == [2.5]
    assert source.closed is True
    assert history.messages == (
        "Added new Factor: 'Demand'",
        "Added new Link: 'from Cost to Demand'",
    )
    assert {entry.category for entry in history.entries} == {MERGE_CATEGORY}


def test_merge_remote_map_rejects_dangling_links_without_committing() -> None:
    uow = FakeGraphUnitOfWork()
    source = StaticRemoteSource([make_node("n1")], [make_edge("e1", "n1", "n2")])

    with pytest.raises(DanglingReferenceError):
        app.merge_remote_map(source, unit_of_work_factory=lambda: uow)

    assert uow.committed == 0
    assert len(uow.graph.nodes) == 0


def test_diff_remote_map_never_commits() -> None:
    uow = FakeGraphUnitOfWork(make_graph([make_node("n1", "Cost")]))
    source = StaticRemoteSource([make_node("n1", "Price")])
    history = HistoryEventLog()

    report = app.diff_remote_map(source, unit_of_work_factory=lambda: uow, event_log=history)

    assert report.messages == (
        "Existing Factor label: 'Cost' does not match new label: 'Price'.",
    )
    assert uow.committed == 0
    assert uow.rolled_back == 1
    assert len(uow.graph.nodes) == 1
    assert {entry.category for entry in history.entries} == {DIFF_CATEGORY}


def test_merge_file_into_database_then_export(
    sqlite_unit_of_work: Callable[[], SqlAlchemyGraphUnitOfWork],
    tmp_path: Path,
) -> None:
    remote_path = tmp_path / "remote.json"
    remote_path.write_text(
        json.dumps(
            {
                "nodes": [
                    {"id": "n1", "label": "Cost", "x": 0, "y": 0, "font": {"size": 14}},
                    {"id": "n2", "label": "Demand", "grp": "group2"},
                ],
                "edges": [{"id": "e1", "from": "n1", "to": "n2", "arrows": "to"}],
            }
        ),
        encoding="utf-8",
    )

    source = app.open_remote_source(file=remote_path)
    result = app.merge_remote_map(source, unit_of_work_factory=sqlite_unit_of_work)
    assert result.mutations == 3

    export_path = tmp_path / "local.json"
    counts = app.export_map_file(export_path, unit_of_work_factory=sqlite_unit_of_work)

    assert counts == (2, 1)
    exported = json.loads(export_path.read_text(encoding="utf-8"))
    assert exported["nodes"][0] == {
        "id": "n1",
        "label": "Cost",
        "x": 0,
        "y": 0,
        "font": {"size": 14},
    }
    assert exported["edges"] == [{"id": "e1", "from": "n1", "to": "n2", "arrows": "to"}]

    second = app.merge_remote_map(
        app.open_remote_source(file=remote_path),
        unit_of_work_factory=sqlite_unit_of_work,
    )
    assert second.mutations == 0


def test_merge_remote_map_logs_change_summary(caplog: pytest.LogCaptureFixture) -> None:
    uow = FakeGraphUnitOfWork(make_graph([make_node("n1", "Cost")]))
    source = StaticRemoteSource([make_node("n1", "Price"), make_node("n2", "Demand")])

    with caplog.at_level(logging.INFO, logger="mapmerge.app"):
        result = app.merge_remote_map(
            source, unit_of_work_factory=lambda: uow, marker=ConflictMarker()
        )

    assert result.mutations == 2
    assert uow.committed == 1
    assert "Finished merge: 2 change(s), 0 notice(s)" in caplog.text
