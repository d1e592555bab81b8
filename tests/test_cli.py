import pytest

from everyday_tasks import FileStorage, TaskManager
from everyday_tasks.cli import Application, format_stats, main
from everyday_tasks.schema import TaskStats


def feed(monkeypatch, replies):
    """Script input(); running out of replies behaves like Ctrl-D"""
    it = iter(replies)

    def fake_input(prompt=""):
        print(prompt, end="")
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def tasks_file(tmp_path):
    return tmp_path / "tasks.txt"


def make_app(path, extended=True):
    return Application(TaskManager(), FileStorage(), path=str(path), extended=extended)


def test_add_toggle_and_exit_saves(monkeypatch, capsys, tasks_file):
    feed(monkeypatch, ["1", "Buy milk", "1", "Write report", "3", "2", "0"])

    assert make_app(tasks_file).run() == 0

    assert tasks_file.read_text(encoding="utf-8") == "0\tBuy milk\n1\tWrite report\n"
    out = capsys.readouterr().out
    assert "Task added." in out
    assert "Status changed." in out
    assert "Goodbye! (list saved)" in out


def test_startup_reports_loaded_tasks(monkeypatch, capsys, tasks_file):
    tasks_file.write_text("0\ta\n1\tb\n", encoding="utf-8")
    feed(monkeypatch, ["2", "", "0"])

    make_app(tasks_file).run()

    out = capsys.readouterr().out
    assert "Loaded 2 task(s)" in out
    assert "1. [ ] a" in out
    assert "2. [x] b" in out


def test_non_numeric_choice_reprompts(monkeypatch, capsys, tasks_file):
    feed(monkeypatch, ["abc", "1", "Task", "0"])

    make_app(tasks_file).run()

    assert "Enter a number: " in capsys.readouterr().out
    assert tasks_file.read_text(encoding="utf-8") == "0\tTask\n"


def test_unknown_choice(monkeypatch, capsys, tasks_file):
    feed(monkeypatch, ["42", "0"])
    make_app(tasks_file).run()
    assert "Invalid choice." in capsys.readouterr().out


def test_basic_menu_rejects_extended_commands(monkeypatch, capsys, tasks_file):
    feed(monkeypatch, ["9", "0"])

    make_app(tasks_file, extended=False).run()

    out = capsys.readouterr().out
    assert "Invalid choice." in out
    assert "Statistics:" not in out
    assert "9. Task statistics" not in out


def test_blank_title_rejected(monkeypatch, capsys, tasks_file):
    feed(monkeypatch, ["1", "   ", "0"])

    make_app(tasks_file).run()

    assert "Title cannot be empty." in capsys.readouterr().out
    assert tasks_file.read_text(encoding="utf-8") == ""


def test_index_out_of_range(monkeypatch, capsys, tasks_file):
    tasks_file.write_text("0\tA\n", encoding="utf-8")
    feed(monkeypatch, ["5", "2", "3", "0", "0"])

    make_app(tasks_file).run()

    out = capsys.readouterr().out
    assert out.count("Invalid number.") == 2
    assert tasks_file.read_text(encoding="utf-8") == "0\tA\n"


def test_index_commands_on_empty_list(monkeypatch, capsys, tasks_file):
    feed(monkeypatch, ["3", "4", "5", "0"])

    make_app(tasks_file).run()

    assert capsys.readouterr().out.count("The list is empty.") == 3


def test_edit_and_delete(monkeypatch, capsys, tasks_file):
    tasks_file.write_text("1\tOld\n0\tOther\n", encoding="utf-8")
    feed(monkeypatch, ["4", "1", "New", "5", "2", "0"])

    make_app(tasks_file).run()

    out = capsys.readouterr().out
    assert "Task edited." in out
    assert "Task deleted." in out
    assert tasks_file.read_text(encoding="utf-8") == "1\tNew\n"


def test_search(monkeypatch, capsys, tasks_file):
    tasks_file.write_text("0\tBuy milk\n1\tWrite report\n0\tBuy bread\n", encoding="utf-8")
    feed(monkeypatch, ["7", "Buy", "", "7", "  ", "7", "zzz", "", "0"])

    make_app(tasks_file).run()

    out = capsys.readouterr().out
    assert "1. [ ] Buy milk" in out
    assert "3. [ ] Buy bread" in out
    assert "Empty query." in out
    assert "Nothing found." in out


def test_filter_not_completed(monkeypatch, capsys, tasks_file):
    tasks_file.write_text("0\tBuy milk\n1\tWrite report\n", encoding="utf-8")
    feed(monkeypatch, ["8", "", "0"])

    make_app(tasks_file).run()

    out = capsys.readouterr().out
    results = out.split("Not completed tasks:")[1]
    assert "1. [ ] Buy milk" in results
    assert "Write report" not in results


def test_stats_after_delete(monkeypatch, capsys, tasks_file):
    tasks_file.write_text("1\ta\n0\tb\n", encoding="utf-8")
    feed(monkeypatch, ["5", "1", "9", "", "0"])

    make_app(tasks_file).run()

    out = capsys.readouterr().out
    assert "Total: 1" in out
    assert "Done: 0" in out
    assert "Not done: 1" in out
    assert "Deleted: 1" in out


def test_explicit_save(monkeypatch, capsys, tasks_file):
    feed(monkeypatch, ["1", "x", "6"])

    make_app(tasks_file).run()

    assert f"Saved to {tasks_file}." in capsys.readouterr().out
    assert tasks_file.read_text(encoding="utf-8") == "0\tx\n"


def test_end_of_input_saves(monkeypatch, tasks_file):
    feed(monkeypatch, ["1", "Unsaved work"])

    assert make_app(tasks_file).run() == 0

    assert tasks_file.read_text(encoding="utf-8") == "0\tUnsaved work\n"


def test_save_failure_is_reported(monkeypatch, capsys, tmp_path):
    target = tmp_path / "missing_dir" / "tasks.txt"
    feed(monkeypatch, ["1", "x", "6", "0"])

    app = make_app(target)
    assert app.run() == 0

    out = capsys.readouterr().out
    assert out.count("Save failed:") == 2
    assert app.manager.size() == 1


def test_format_stats_progress_bar():
    text = format_stats(TaskStats(total=4, done=2, not_done=2, deleted_lifetime=0))
    assert "Progress: █████░░░░░ 50%" in text


def test_main_uses_file_option(monkeypatch, tasks_file):
    feed(monkeypatch, ["1", "From main", "0"])

    assert main(["-f", str(tasks_file), "--basic"]) == 0

    assert tasks_file.read_text(encoding="utf-8") == "0\tFrom main\n"
