from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional

from ..core.constants import ISO_DATE_FORMAT, TIME_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Longer ISO strings (``2024-01-10T00:00:00``) are cut to the date part.
    """
    return datetime.strptime(str(value).strip()[:10], ISO_DATE_FORMAT).date()


def parse_optional_date(value: Any) -> Optional[date]:
    if value in (None, ""):
        return None
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def parse_clock_time(value: Any) -> Optional[time]:
    """Parse HH:MM:SS (or HH:MM) into time, empty values become None."""
    if value in (None, ""):
        return None
    if isinstance(value, time):
        return value
    v = str(value).strip()
    fmt = TIME_FORMAT if v.count(":") == 2 else "%H:%M"
    return datetime.strptime(v, fmt).time()


def format_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def format_clock_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def inclusive_days(start: date, end: date) -> int:
    """Number of calendar days covered by [start, end]; <= 0 when end < start."""
    return (end - start).days + 1


def hours_between(start: time, end: time, *, on: date) -> float:
    """Wall-clock hours from start to end on the same day, rounded to 2 decimals."""
    delta = datetime.combine(on, end) - datetime.combine(on, start)
    return round(delta.total_seconds() / 3600, 2)


def same_month(value: date, reference: date) -> bool:
    return (value.year, value.month) == (reference.year, reference.month)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
