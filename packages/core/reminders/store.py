from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Dict, List, Optional

from .dates import Clock, is_same_day, today_local
from .ids import UniqueIdGenerator
from .models import Reminder

if TYPE_CHECKING:
    from ..storage.base import ReminderSnapshotStore

logger = logging.getLogger(__name__)


class ReminderStore:
    """In-memory reminders keyed by id, mirrored to a snapshot store.

    The full mapping is loaded once at construction and written back in full
    after every successful mutation. Lookups and filters never touch the
    snapshot store. If a write fails, the one entry the call touched is
    restored and the StorageError propagates.
    """

    def __init__(
        self,
        snapshots: ReminderSnapshotStore,
        *,
        id_generator: Optional[UniqueIdGenerator] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._snapshots = snapshots
        self._id_generator = id_generator or UniqueIdGenerator()
        self._clock = clock or today_local
        self._reminders: Dict[str, Reminder] = dict(snapshots.load())
        logger.info("ReminderStore initialized count=%d", len(self._reminders))

    def __len__(self) -> int:
        return len(self._reminders)

    def _commit(self, reminder_id: str, reminder: Optional[Reminder]) -> None:
        """Set (or delete, when ``reminder`` is None) one entry and persist."""
        previous = self._reminders.get(reminder_id)
        position = None
        if reminder is None:
            position = list(self._reminders).index(reminder_id)
            del self._reminders[reminder_id]
        else:
            self._reminders[reminder_id] = reminder
        try:
            self._snapshots.save(list(self._reminders.items()))
        except Exception:
            if previous is None:
                self._reminders.pop(reminder_id, None)
            elif position is None:
                self._reminders[reminder_id] = previous
            else:
                items = list(self._reminders.items())
                items.insert(position, (reminder_id, previous))
                self._reminders = dict(items)
            raise

    def create(self, text: str, date: str) -> str:
        reminder_id = self._id_generator.generate(self.exists, taken_ids=self._reminders)
        self._commit(reminder_id, Reminder(id=reminder_id, text=text, date=date))
        logger.info("reminder_created id=%s", reminder_id)
        return reminder_id

    def exists(self, reminder_id: str) -> bool:
        return reminder_id in self._reminders

    def get(self, reminder_id: str) -> Optional[Reminder]:
        return self._reminders.get(reminder_id)

    def get_all(self) -> List[Reminder]:
        return list(self._reminders.values())

    def _replace(self, reminder_id: str, **changes) -> bool:
        current = self._reminders.get(reminder_id)
        if current is None:
            return False
        self._commit(reminder_id, dataclasses.replace(current, **changes))
        return True

    def update(self, reminder_id: str, text: str, date: str) -> bool:
        updated = self._replace(reminder_id, text=text, date=date)
        if updated:
            logger.info("reminder_updated id=%s", reminder_id)
        else:
            logger.warning("reminder_not_found op=update id=%s", reminder_id)
        return updated

    def remove(self, reminder_id: str) -> bool:
        if reminder_id not in self._reminders:
            logger.warning("reminder_not_found op=remove id=%s", reminder_id)
            return False
        self._commit(reminder_id, None)
        logger.info("reminder_removed id=%s", reminder_id)
        return True

    def mark_completed(self, reminder_id: str) -> bool:
        return self._set_completed(reminder_id, True)

    def unmark_completed(self, reminder_id: str) -> bool:
        return self._set_completed(reminder_id, False)

    def _set_completed(self, reminder_id: str, completed: bool) -> bool:
        changed = self._replace(reminder_id, completed=completed)
        if changed:
            logger.info("reminder_completed_set id=%s completed=%s", reminder_id, completed)
        else:
            logger.warning("reminder_not_found op=set_completed id=%s", reminder_id)
        return changed

    def filter_completed(self) -> List[Reminder]:
        return [r for r in self._reminders.values() if r.completed]

    def filter_pending(self) -> List[Reminder]:
        return [r for r in self._reminders.values() if not r.completed]

    def filter_due_today(self) -> List[Reminder]:
        today = self._clock()
        return [r for r in self._reminders.values() if is_same_day(r.date, today)]
