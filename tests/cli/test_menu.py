import datetime as dt
import io
import json

from apps.cli.main import main, run_menu
from packages.core.reminders.store import ReminderStore
from packages.core.storage.json_file import JsonFileSnapshotStore


def _store(tmp_path, clock=None):
    return ReminderStore(
        JsonFileSnapshotStore(str(tmp_path / "reminders.json")), clock=clock
    )


def _run(store, *lines):
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    run_menu(store, stdin, stdout)
    return stdout.getvalue()


def test_menu_create_and_view(tmp_path):
    store = _store(tmp_path)

    output = _run(store, "1", "Pay rent", "2024-01-01", "2", "11")

    reminder = store.get_all()[0]
    assert reminder.text == "Pay rent"
    assert f"Reminder created with ID {reminder.id}." in output
    assert "Pay rent" in output.split("Choose an option: ")[2]
    assert output.rstrip().endswith("Exiting...")


def test_menu_get_update_remove(tmp_path):
    store = _store(tmp_path)
    reminder_id = store.create("Pay rent", "2024-01-01")

    output = _run(
        store,
        "3", reminder_id,
        "5", reminder_id, "Pay rent early", "2024-01-02",
        "4", reminder_id,
        "4", reminder_id,
        "11",
    )

    assert "Reminder updated." in output
    assert "Reminder removed." in output
    assert "Reminder not found." in output
    assert store.exists(reminder_id) is False


def test_menu_update_missing_skips_prompts(tmp_path):
    store = _store(tmp_path)

    output = _run(store, "5", "9999", "11")

    assert "Reminder not found." in output
    assert "Enter new Reminder Text" not in output


def test_menu_mark_and_filters(tmp_path):
    store = _store(tmp_path, clock=lambda: dt.date(2024, 3, 15))
    done = store.create("Done already", "2024-03-15")
    store.create("Still open", "2024-03-16")

    output = _run(store, "6", done, "8", "7", done, "9", "10", "6", "9999", "11")

    assert "Reminder marked as completed." in output
    assert "Reminder unmarked as completed." in output
    assert "Reminder not found." in output
    assert store.get(done).completed is False
    assert "Done already" in output


def test_menu_invalid_choice(tmp_path):
    output = _run(_store(tmp_path), "42", "11")
    assert "Invalid option. Try again." in output


def test_menu_stops_at_end_of_input(tmp_path):
    store = _store(tmp_path)
    output = _run(store, "1", "Half typed")
    assert output.rstrip().endswith("Exiting...")
    assert store.get_all() == []


def test_main_uses_file_flag(tmp_path, monkeypatch):
    path = tmp_path / "cli.json"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nPay rent\n2024-01-01\n11\n"))
    monkeypatch.setattr("sys.stdout", io.StringIO())

    assert main(["--file", str(path)]) == 0

    payload = json.loads(path.read_text())
    assert payload[0][1]["text"] == "Pay rent"


def test_main_reports_corrupt_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "cli.json"
    path.write_text("{oops")

    assert main(["--file", str(path)]) == 1
    assert "Cannot open reminders" in capsys.readouterr().err


def test_main_reports_logging_misconfiguration(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("LOG_DESTINATION", "file")
    monkeypatch.delenv("LOG_FILE", raising=False)

    assert main(["--file", str(tmp_path / "cli.json")]) == 1
    assert "Cannot configure logging" in capsys.readouterr().err
