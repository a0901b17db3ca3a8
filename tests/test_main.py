# tests/test_main.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from todo_tracker.cli.main import EXIT_FATAL, EXIT_OK, main


def _run(settings: SimpleNamespace, capsys: pytest.CaptureFixture[str], *argv: str):
    code = main(list(argv), settings=settings)
    out, err = capsys.readouterr()
    return code, out, err


def test_add_list_complete_flow(settings, capsys) -> None:
    path = settings.tasks_path

    assert _run(settings, capsys, "add", "buy milk") == (EXIT_OK, "Added task: buy milk\n", "")
    assert path.read_text("utf-8") == '[{"task":"buy milk","completed":false}]'

    assert _run(settings, capsys, "list") == (EXIT_OK, "1: [ ] buy milk\n", "")

    assert _run(settings, capsys, "complete", "1") == (
        EXIT_OK,
        "Marked task 1 as completed.\n",
        "",
    )
    assert _run(settings, capsys, "list") == (EXIT_OK, "1: [x] buy milk\n", "")


def test_list_without_file_prints_nothing_and_creates_nothing(settings, capsys) -> None:
    assert _run(settings, capsys, "list") == (EXIT_OK, "", "")
    assert not settings.tasks_path.exists()


def test_list_never_rewrites_file(settings, capsys) -> None:
    raw = '[ {"task": "spaced", "completed": true} ]'
    settings.tasks_path.write_text(raw, "utf-8")

    code, out, _ = _run(settings, capsys, "list")
    assert code == EXIT_OK
    assert out == "1: [x] spaced\n"
    assert settings.tasks_path.read_text("utf-8") == raw


def test_corrupt_file_behaves_as_empty(settings, capsys) -> None:
    settings.tasks_path.write_text("{{garbage", "utf-8")
    assert _run(settings, capsys, "list") == (EXIT_OK, "", "")

    _run(settings, capsys, "add", "fresh start")
    assert settings.tasks_path.read_text("utf-8") == '[{"task":"fresh start","completed":false}]'


def test_strict_load_reports_corrupt_file(settings, capsys) -> None:
    settings.strict_load = True
    settings.tasks_path.write_text("{{garbage", "utf-8")

    code, out, err = _run(settings, capsys, "list")
    assert code == EXIT_FATAL
    assert out == ""
    assert err.startswith("Error: invalid task file")


@pytest.mark.parametrize("argv", [[], ["frobnicate"], ["add"], ["complete"], ["complete", "5"]])
def test_user_errors_exit_zero_without_saving(settings, capsys, argv) -> None:
    code, out, err = _run(settings, capsys, *argv)
    assert code == EXIT_OK
    assert out.strip()
    assert err == ""
    assert not settings.tasks_path.exists()


def test_complete_boundaries_leave_file_unchanged(settings, capsys) -> None:
    _run(settings, capsys, "add", "a")
    _run(settings, capsys, "add", "b")
    before = settings.tasks_path.read_text("utf-8")

    for raw in ("0", "3"):
        code, out, _ = _run(settings, capsys, "complete", raw)
        assert code == EXIT_OK
        assert out == "Task number does not exist.\n"

    assert settings.tasks_path.read_text("utf-8") == before


def test_invalid_index_is_fatal_and_saves_nothing(settings, capsys) -> None:
    _run(settings, capsys, "add", "a")
    before = settings.tasks_path.read_text("utf-8")

    code, out, err = _run(settings, capsys, "complete", "first")
    assert code == EXIT_FATAL
    assert out == ""
    assert err == "Error: Invalid index: 'first'\n"
    assert settings.tasks_path.read_text("utf-8") == before


def test_write_failure_is_fatal(settings, capsys, tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    settings.tasks_path = blocker / "todos.json"

    code, out, err = _run(settings, capsys, "add", "lost")
    assert code == EXIT_FATAL
    assert out == ""
    assert err.startswith("Error: unable to write")


def test_deeply_nested_file_behaves_as_empty(settings, capsys) -> None:
    settings.tasks_path.write_text("[" * 100000, "utf-8")
    assert _run(settings, capsys, "list") == (EXIT_OK, "", "")


def test_unencodable_task_text_is_fatal(settings, capsys) -> None:
    code, out, err = _run(settings, capsys, "add", "bad\udcff")
    assert code == EXIT_FATAL
    assert out == ""
    assert err.startswith("Error: unable to write")
    assert list(settings.tasks_path.parent.iterdir()) == []
