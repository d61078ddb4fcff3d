from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Reminder:
    id: str
    text: str
    date: str
    completed: bool = False
