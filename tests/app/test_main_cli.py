from __future__ import annotations

import sys
from pathlib import Path
from signal import SIGINT

import pytest

from mapmerge.adapters.remote import HttpRemoteGraphSource
from mapmerge.domain.reconciliation import DiffReport, MergeResult
from mapmerge.ui import cli
from tests.helpers.maps import StaticRemoteSource


def _capture_source(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    captured: dict[str, object] = {}

    def fake_open(**kwargs: object) -> StaticRemoteSource:
        captured.update(kwargs)
        return StaticRemoteSource()

    monkeypatch.setattr(cli, "open_remote_source", fake_open)
    return captured


def test_merge_command_with_file(monkeypatch: pytest.MonkeyPatch) -> None:
    opened = _capture_source(monkeypatch)
    captured: dict[str, object] = {}

    def fake_merge(source: object, **kwargs: object) -> MergeResult:
        captured["source"] = source
        captured.update(kwargs)
        return MergeResult()

    monkeypatch.setattr(cli, "merge_remote_map", fake_merge)

    cli.main(["merge", "--file", "remote.json"])

    assert opened == {"file": Path("remote.json"), "room": None, "url": None}
    assert isinstance(captured["source"], StaticRemoteSource)
    assert captured["timeout"] is None
    assert captured["event_log"] is not None


def test_diff_command_with_room(monkeypatch: pytest.MonkeyPatch) -> None:
    opened = _capture_source(monkeypatch)
    captured: dict[str, object] = {}

    def fake_diff(source: object, **kwargs: object) -> DiffReport:
        captured.update(kwargs)
        return DiffReport()

    monkeypatch.setattr(cli, "diff_remote_map", fake_diff)

    cli.main(["diff", "--room", "ABC123", "--url", "https://rooms.example", "--timeout", "5"])

    assert opened == {"file": None, "room": "ABC123", "url": "https://rooms.example"}
    assert captured["timeout"] == 5.0


def test_export_command(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[Path] = []

    def fake_export(path: Path) -> tuple[int, int]:
        captured.append(path)
        return (0, 0)

    monkeypatch.setattr(cli, "export_map_file", fake_export)

    cli.main(["export", "out.json"])

    assert captured == [Path("out.json")]


def test_file_and_room_are_mutually_exclusive() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["merge", "--file", "remote.json", "--room", "ABC123"])

    assert excinfo.value.code == 2


def test_url_without_room_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["diff", "--file", "remote.json", "--url", "https://rooms.example"])

    assert excinfo.value.code == 2


def test_non_positive_timeout_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["merge", "--room", "ABC123", "--timeout", "0"])

    assert excinfo.value.code == 2


def test_failures_exit_with_status_one(monkeypatch: pytest.MonkeyPatch) -> None:
    _capture_source(monkeypatch)

    def failing_merge(source: object, **kwargs: object) -> MergeResult:
        raise RuntimeError("room server unavailable")

    monkeypatch.setattr(cli, "merge_remote_map", failing_merge)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["merge", "--room", "ABC123"])

    assert excinfo.value.code == 1


def test_run_loads_dotenv_and_traps_sigint(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[object] = []

    monkeypatch.setattr(cli, "load_dotenv", lambda *_args: calls.append("dotenv"))
    monkeypatch.setattr(cli, "signal", lambda signum, handler: calls.append((signum, handler)))
    monkeypatch.setattr(cli, "main", lambda: calls.append("main"))

    cli.run()

    assert calls == ["dotenv", (SIGINT, cli.sigint_handler), "main"]


def test_run_reads_remote_url_from_dotenv(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    (tmp_path / ".env").write_text("MAPMERGE_REMOTE_URL=https://rooms.example\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MAPMERGE_REMOTE_URL", raising=False)
    monkeypatch.setattr(cli, "signal", lambda signum, handler: None)
    monkeypatch.setattr(sys, "argv", ["mapmerge", "diff", "--room", "ABC123"])
    captured: dict[str, object] = {}

    def fake_diff(source: object, **kwargs: object) -> DiffReport:
        captured["source"] = source
        return DiffReport()

    monkeypatch.setattr(cli, "diff_remote_map", fake_diff)

    cli.run()

    source = captured["source"]
    assert isinstance(source, HttpRemoteGraphSource)
    assert source.config.base_url == "https://rooms.example"
