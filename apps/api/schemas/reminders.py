from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ReminderView(str, Enum):
    completed = "completed"
    pending = "pending"
    due_today = "due_today"


class ReminderWriteRequest(BaseModel):
    text: str
    date: str


class ReminderResponse(BaseModel):
    id: str
    text: str
    date: str
    completed: bool
