from __future__ import annotations

import datetime as dt
from typing import Callable

Clock = Callable[[], dt.date]


def today_local() -> dt.date:
    return dt.date.today()


def is_same_day(date_text: str, day: dt.date) -> bool:
    """Return True when ``date_text`` is ``day`` written as YYYY-MM-DD.

    Dates are stored as opaque strings, so this is plain string equality
    against the ISO form of ``day``. Past dates never match.
    """
    return date_text == day.isoformat()
