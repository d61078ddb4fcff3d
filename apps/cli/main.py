from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from apps.cli.render import format_reminder, format_table
from packages.core.config import build_reminder_store
from packages.core.errors import ReminderError, StorageError
from packages.core.logging_config import configure_logging
from packages.core.reminders.store import ReminderStore

logger = logging.getLogger("reminders.cli")

NOT_FOUND = "Reminder not found."


class _EndOfInput(Exception):
    pass


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def ask(self, question: str) -> str:
        self._stdout.write(question)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise _EndOfInput()
        return line.strip()

    def say(self, message: str = "") -> None:
        self._stdout.write(message + "\n")


def _create(store: ReminderStore, console: _Console) -> None:
    text = console.ask("Enter Reminder Text: ")
    date = console.ask("Enter Date (YYYY-MM-DD): ")
    reminder_id = store.create(text, date)
    console.say(f"Reminder created with ID {reminder_id}.")


def _view_all(store: ReminderStore, console: _Console) -> None:
    console.say(format_table(store.get_all()))


def _get(store: ReminderStore, console: _Console) -> None:
    reminder = store.get(console.ask("Enter Reminder ID: "))
    console.say(NOT_FOUND if reminder is None else format_reminder(reminder))


def _remove(store: ReminderStore, console: _Console) -> None:
    reminder_id = console.ask("Enter Reminder ID to remove: ")
    console.say("Reminder removed." if store.remove(reminder_id) else NOT_FOUND)


def _update(store: ReminderStore, console: _Console) -> None:
    reminder_id = console.ask("Enter Reminder ID to update: ")
    if not store.exists(reminder_id):
        console.say(NOT_FOUND)
        return
    text = console.ask("Enter new Reminder Text: ")
    date = console.ask("Enter new Date (YYYY-MM-DD): ")
    console.say("Reminder updated." if store.update(reminder_id, text, date) else NOT_FOUND)


def _mark(store: ReminderStore, console: _Console) -> None:
    reminder_id = console.ask("Enter Reminder ID to mark as completed: ")
    console.say(
        "Reminder marked as completed." if store.mark_completed(reminder_id) else NOT_FOUND
    )


def _unmark(store: ReminderStore, console: _Console) -> None:
    reminder_id = console.ask("Enter Reminder ID to unmark as completed: ")
    console.say(
        "Reminder unmarked as completed." if store.unmark_completed(reminder_id) else NOT_FOUND
    )


def _view_completed(store: ReminderStore, console: _Console) -> None:
    console.say(format_table(store.filter_completed()))


def _view_pending(store: ReminderStore, console: _Console) -> None:
    console.say(format_table(store.filter_pending()))


def _view_due_today(store: ReminderStore, console: _Console) -> None:
    console.say(format_table(store.filter_due_today()))


Action = Callable[[ReminderStore, _Console], None]

EXIT_CHOICE = "11"
MENU: List[Tuple[str, str, Optional[Action]]] = [
    ("1", "Create Reminder", _create),
    ("2", "View All Reminders", _view_all),
    ("3", "Get Reminder", _get),
    ("4", "Remove Reminder", _remove),
    ("5", "Update Reminder", _update),
    ("6", "Mark Reminder as Completed", _mark),
    ("7", "Unmark Reminder as Completed", _unmark),
    ("8", "View Completed Reminders", _view_completed),
    ("9", "View Pending Reminders", _view_pending),
    ("10", "View Reminders Due Today", _view_due_today),
    (EXIT_CHOICE, "Exit", None),
]
ACTIONS: Dict[str, Optional[Action]] = {choice: action for choice, _, action in MENU}


def run_menu(store: ReminderStore, stdin: TextIO, stdout: TextIO) -> None:
    """Prompt for menu choices until Exit is chosen or input runs out."""
    console = _Console(stdin, stdout)
    try:
        while True:
            console.say()
            for choice, label, _ in MENU:
                console.say(f"{choice}. {label}")
            choice = console.ask("Choose an option: ")
            if choice not in ACTIONS:
                console.say("Invalid option. Try again.")
                continue
            action = ACTIONS[choice]
            if action is None:
                break
            try:
                action(store, console)
            except ReminderError as exc:
                logger.error("menu_action_failed choice=%s error=%s", choice, exc)
                console.say(f"Error: {exc}")
    except _EndOfInput:
        logger.debug("menu_input_closed")
    console.say("Exiting...")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage reminders stored in a local JSON file")
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="Reminders file (default: $REMINDERS_FILE or ./reminders.json)",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Log level for messages written to stderr (default: $LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        configure_logging(
            default_level="WARNING",
            default_destination="stderr",
            level=args.log_level,
        )
    except (RuntimeError, ValueError) as exc:
        sys.stderr.write(f"Cannot configure logging: {exc}\n")
        return 1
    try:
        store = build_reminder_store(path=args.file)
    except (StorageError, ValueError) as exc:
        sys.stderr.write(f"Cannot open reminders: {exc}\n")
        return 1
    run_menu(store, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
