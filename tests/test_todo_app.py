import json

import todo
from core.desktop.devtools.interface import todo_app


def test_loader_exposes_interface_module():
    assert todo.main is todo_app.main
    assert todo.TodoTUI is todo_app.TodoTUI


def test_main_add_then_workspace(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    assert todo_app.main(["add", "Buy milk"]) == 0
    assert todo_app.main(["workspace", "set", "work"]) == 0
    assert todo_app.main(["add", "Ship it"]) == 0
    capsys.readouterr()
    assert json.loads((tmp_path / "db.json").read_text(encoding="utf-8"))["todos"][0]["title"] == "Buy milk"
    assert json.loads((tmp_path / "db.work.json").read_text(encoding="utf-8"))["todos"][0]["title"] == "Ship it"


def test_main_without_command_runs_tui(monkeypatch):
    calls = []
    monkeypatch.setattr(todo_app, "cmd_tui", lambda args: calls.append(args) or 0)
    assert todo_app.main([]) == 0
    assert len(calls) == 1


def test_main_version(capsys):
    assert todo_app.main(["--version"]) == 0
    assert capsys.readouterr().out.strip()


def test_main_data_dir_flag_overrides_env(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path / "env"))
    assert todo_app.main(["--data-dir", str(tmp_path / "flag"), "add", "Buy milk"]) == 0
    capsys.readouterr()
    assert (tmp_path / "flag" / "db.json").exists()
    assert not (tmp_path / "env" / "db.json").exists()
