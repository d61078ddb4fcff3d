from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Any, Dict, List

from ..errors import StorageError
from ..reminders.models import Reminder
from .base import ReminderPair

logger = logging.getLogger(__name__)


def _record_to_dict(reminder: Reminder) -> Dict[str, Any]:
    return {
        "id": reminder.id,
        "text": reminder.text,
        "date": reminder.date,
        "completed": reminder.completed,
    }


def _record_from_dict(key: str, record: Any) -> Reminder:
    if not isinstance(record, dict):
        raise ValueError(f"record for {key!r} is not an object")
    reminder_id = record.get("id", key)
    if reminder_id != key:
        raise ValueError(f"record id {reminder_id!r} does not match key {key!r}")
    text = record.get("text")
    date = record.get("date")
    completed = record.get("completed", False)
    if not isinstance(text, str) or not isinstance(date, str):
        raise ValueError(f"record {key!r} is missing text or date")
    if not isinstance(completed, bool):
        raise ValueError(f"record {key!r} has a non-boolean completed flag")
    return Reminder(id=key, text=text, date=date, completed=completed)


def _pairs_from_payload(payload: Any) -> List[ReminderPair]:
    if not isinstance(payload, list):
        raise ValueError("expected a list of [id, reminder] pairs")
    pairs: List[ReminderPair] = []
    seen = set()
    for entry in payload:
        if not isinstance(entry, list) or len(entry) != 2 or not isinstance(entry[0], str):
            raise ValueError(f"malformed pair: {entry!r}")
        key, record = entry
        if key in seen:
            raise ValueError(f"duplicate id {key!r}")
        seen.add(key)
        pairs.append((key, _record_from_dict(key, record)))
    return pairs


class JsonFileSnapshotStore:
    """Reminders persisted as a JSON array of ``[id, reminder]`` pairs.

    Each write goes to its own temporary file in the target's directory,
    which then replaces the target, so an interrupted write leaves the
    previous file in place.
    """

    def __init__(self, path: str) -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> List[ReminderPair]:
        if not os.path.exists(self._path):
            logger.info("reminders_file_missing path=%s", self._path)
            return []
        try:
            with open(self._path, "r", encoding="utf-8") as handle:
                payload = json.load(handle)
            pairs = _pairs_from_payload(payload)
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.error("reminders_load_failed path=%s error=%s", self._path, exc)
            raise StorageError(f"Cannot load reminders from {self._path}: {exc}") from exc
        logger.info("reminders_loaded path=%s count=%d", self._path, len(pairs))
        return pairs

    def save(self, pairs: List[ReminderPair]) -> None:
        payload = [[key, _record_to_dict(reminder)] for key, reminder in pairs]
        directory = os.path.dirname(os.path.abspath(self._path))
        temp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{os.path.basename(self._path)}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                temp_path = handle.name
                json.dump(payload, handle, indent=2)
            os.replace(temp_path, self._path)
        except OSError as exc:
            logger.error("reminders_save_failed path=%s error=%s", self._path, exc)
            if temp_path is not None and os.path.exists(temp_path):
                os.remove(temp_path)
            raise StorageError(f"Cannot save reminders to {self._path}: {exc}") from exc
        logger.debug("reminders_saved path=%s count=%d", self._path, len(pairs))
