from .ids import UniqueIdGenerator
from .models import Reminder
from .store import ReminderStore

__all__ = [
    "Reminder",
    "ReminderStore",
    "UniqueIdGenerator",
]
