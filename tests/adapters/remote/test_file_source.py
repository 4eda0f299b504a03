from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from mapmerge.adapters.remote import JsonFileRemoteGraphSource
from mapmerge.domain.ports import (
    RemoteGraphSource,
    RemoteSourceError,
    RemoteSourceNotReadyError,
)

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_file_source_is_ready_once_opened(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "remote.json",
        {
            "nodes": [{"id": "n1", "label": "Cost"}, {"id": "n2", "label": "Demand"}],
            "edges": [{"id": "e1", "from": "n1", "to": "n2"}],
        },
    )
    source = JsonFileRemoteGraphSource(path)
    assert isinstance(source, RemoteGraphSource)

    with source:
        source.wait_until_ready(timeout=0.1)
        assert [node.label for node in source.get_nodes()] == ["Cost", "Demand"]
        assert [edge.id for edge in source.get_edges()] == ["e1"]

    assert source.is_open is False
    with pytest.raises(RemoteSourceNotReadyError):
        source.get_nodes()


def test_file_source_requires_open_before_waiting(tmp_path: Path) -> None:
    source = JsonFileRemoteGraphSource(_write(tmp_path / "remote.json", {"nodes": []}))

    with pytest.raises(RemoteSourceNotReadyError):
        source.wait_until_ready()


def test_file_source_reports_missing_file(tmp_path: Path) -> None:
    source = JsonFileRemoteGraphSource(tmp_path / "missing.json")

    with pytest.raises(RemoteSourceError, match="Cannot read"):
        source.open()


def test_file_source_reports_malformed_map(tmp_path: Path) -> None:
    path = _write(tmp_path / "remote.json", {"nodes": [{"label": "no id"}]})

    with pytest.raises(RemoteSourceError, match="Malformed"):
        JsonFileRemoteGraphSource(path).open()
