from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Tuple


def start_of_day(value: date) -> datetime:
    return datetime.combine(_as_date(value), time.min)


def end_of_day(value: date) -> datetime:
    """Last representable millisecond of the day (23:59:59.999)."""
    return datetime.combine(_as_date(value), time(23, 59, 59, 999000))


def day_window(value: date) -> Tuple[datetime, datetime]:
    return start_of_day(value), end_of_day(value)


def to_datetime(value: Optional[date]) -> Optional[datetime]:
    """Date-only inputs are stored at midnight."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    return start_of_day(value)


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
