from __future__ import annotations

from typing import List, Protocol, Tuple, runtime_checkable

from ..reminders.models import Reminder

ReminderPair = Tuple[str, Reminder]


@runtime_checkable
class ReminderSnapshotStore(Protocol):
    def load(self) -> List[ReminderPair]:
        """Return every persisted (id, reminder) pair in stored order.

        Returns an empty list when nothing has been persisted yet.
        Raises StorageError when the persisted data cannot be read.
        """

    def save(self, pairs: List[ReminderPair]) -> None:
        """Replace the persisted state with ``pairs``. Raises StorageError."""
