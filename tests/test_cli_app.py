from __future__ import annotations

from pathlib import Path

import pytest

from herbmarket.data.paths import get_config_path, get_repo_root
from herbmarket.presentation.cli import app


def test_main_prints_fenced_table(monkeypatch, capsys) -> None:
    monkeypatch.chdir(get_repo_root())
    app.main()
    out = capsys.readouterr().out.splitlines()

    assert out[0] == "```"
    assert out[2].startswith("| Herb ")
    assert out[2].endswith("| Quantity | Price (gp) |")
    assert out[-1] == "```"


def test_main_rows_are_sorted(capsys) -> None:
    app.main(get_repo_root())
    out = capsys.readouterr().out.splitlines()
    rows = out[4:-2]
    names = [row.split("|")[1].strip() for row in rows]

    assert names == sorted(names)


def test_main_exits_with_error_for_missing_config(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        app.main(tmp_path)

    message = str(excinfo.value.code)
    assert message.startswith("Error: Config file not found")
    assert str(get_config_path(tmp_path)) in message


def test_main_exits_with_error_for_invalid_config(tmp_path: Path) -> None:
    get_config_path(tmp_path).write_text("local_biomes = 3\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        app.main(tmp_path)

    assert str(excinfo.value.code).startswith("Error: config has missing fields")


def test_pause_runs_only_on_windows(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(app.subprocess, "run", lambda args, check: calls.append(args))

    monkeypatch.setattr(app.os, "name", "posix")
    app._pause_if_windows()
    assert calls == []

    monkeypatch.setattr(app.os, "name", "nt")
    app._pause_if_windows()
    assert calls == [["cmd.exe", "/c", "pause"]]
