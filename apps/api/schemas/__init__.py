from .reminders import ReminderResponse, ReminderView, ReminderWriteRequest

__all__ = [
    "ReminderResponse",
    "ReminderView",
    "ReminderWriteRequest",
]
