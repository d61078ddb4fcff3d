from __future__ import annotations

from typing import List, Sequence, Tuple

from packages.core.reminders.models import Reminder

COLUMNS: Sequence[Tuple[str, int]] = (
    ("ID", 6),
    ("Text", 30),
    ("Date", 12),
    ("Completed", 9),
)
EMPTY_MESSAGE = "No reminders found."


def _cell(value: str, width: int) -> str:
    if len(value) > width:
        return value[: width - 3] + "..."
    return value.ljust(width)


def _row(values: Sequence[str]) -> str:
    return " | ".join(
        _cell(value, width) for value, (_, width) in zip(values, COLUMNS)
    ).rstrip()


def format_reminder(reminder: Reminder) -> str:
    return format_table([reminder])


def format_table(reminders: List[Reminder]) -> str:
    if not reminders:
        return EMPTY_MESSAGE
    header = _row([name for name, _ in COLUMNS])
    divider = "-+-".join("-" * width for _, width in COLUMNS)
    lines = [header, divider]
    for reminder in reminders:
        lines.append(
            _row(
                [
                    reminder.id,
                    reminder.text,
                    reminder.date,
                    "yes" if reminder.completed else "no",
                ]
            )
        )
    return "\n".join(lines)
