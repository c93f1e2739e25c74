from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Tuple

from ..core.exceptions import ValidationError
from ..holidays.model import Holiday

HOLIDAY_FILTERS = ("all", "upcoming", "past")


def upcoming_holidays(holidays: Iterable[Holiday], today: date, *, limit: Optional[int] = None) -> Tuple[Holiday, ...]:
    """Holidays on or after ``today``, earliest first."""
    items = sorted((h for h in holidays if h.date >= today), key=lambda h: h.date)
    return tuple(items[:limit] if limit is not None else items)


def filter_holidays(holidays: Iterable[Holiday], today: date, which: str = "all") -> Tuple[Holiday, ...]:
    which = (which or "all").strip().lower()
    if which not in HOLIDAY_FILTERS:
        raise ValidationError(f"Unknown holiday filter: {which}")

    if which == "upcoming":
        return upcoming_holidays(holidays, today)
    items = holidays if which == "all" else (h for h in holidays if h.date < today)
    return tuple(sorted(items, key=lambda h: h.date))
