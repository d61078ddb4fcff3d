from __future__ import annotations

import os
from typing import Optional

from .reminders.ids import DEFAULT_MAX_ATTEMPTS, UniqueIdGenerator
from .reminders.store import ReminderStore
from .storage.json_file import JsonFileSnapshotStore

DEFAULT_REMINDERS_PATH = "reminders.json"


def resolve_reminders_path(path: Optional[str] = None) -> str:
    return path or os.getenv("REMINDERS_FILE", DEFAULT_REMINDERS_PATH)


def resolve_id_max_attempts(value: Optional[int] = None) -> int:
    if value is not None:
        return value
    raw = os.getenv("REMINDERS_ID_MAX_ATTEMPTS")
    if not raw:
        return DEFAULT_MAX_ATTEMPTS
    try:
        attempts = int(raw)
    except ValueError as exc:
        raise ValueError(f"REMINDERS_ID_MAX_ATTEMPTS must be an integer, got {raw!r}") from exc
    if attempts < 1:
        raise ValueError("REMINDERS_ID_MAX_ATTEMPTS must be at least 1")
    return attempts


def build_reminder_store(
    path: Optional[str] = None, max_attempts: Optional[int] = None
) -> ReminderStore:
    """Construct the JSON-backed store from arguments or the environment."""
    snapshots = JsonFileSnapshotStore(resolve_reminders_path(path))
    generator = UniqueIdGenerator(max_attempts=resolve_id_max_attempts(max_attempts))
    return ReminderStore(snapshots, id_generator=generator)
