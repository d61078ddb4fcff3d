from .base import ReminderPair, ReminderSnapshotStore
from .json_file import JsonFileSnapshotStore

__all__ = [
    "JsonFileSnapshotStore",
    "ReminderPair",
    "ReminderSnapshotStore",
]
