from __future__ import annotations


class ReminderError(Exception):
    """Base exception for reminder errors."""


class StorageError(ReminderError):
    """The reminders file cannot be read, parsed, or written."""


class IdSpaceExhaustedError(ReminderError):
    """No free reminder id could be found."""
