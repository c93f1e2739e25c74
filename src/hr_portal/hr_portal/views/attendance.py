from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..attendance.model import AttendanceRecord
from ..core.constants import EMPLOYEE_ATTENDANCE_HISTORY, TEAM_ATTENDANCE_HISTORY
from ..core.enums import Capability, Relation
from ..employees.model import Employee
from .capabilities import CapabilityResolver
from .source import EntitySource


@dataclass(frozen=True)
class AttendanceRow:
    record: AttendanceRecord
    employee_name: str
    is_today: bool

    def to_dict(self) -> dict:
        data = self.record.to_api()
        data["employeeName"] = self.employee_name
        data["isToday"] = self.is_today
        return data


def history_limit(actor: Employee, source: EntitySource) -> int:
    resolver = CapabilityResolver(actor, source.employees)
    only_self = not (
        resolver.allows(Capability.VIEW_ATTENDANCE, Relation.DIRECT_REPORT)
        or resolver.allows(Capability.VIEW_ATTENDANCE, Relation.OTHER)
    )
    return EMPLOYEE_ATTENDANCE_HISTORY if only_self else TEAM_ATTENDANCE_HISTORY


def visible_attendance(
    actor: Employee,
    source: EntitySource,
    *,
    today: date,
    limit: Optional[int] = None,
) -> Tuple[AttendanceRow, ...]:
    """Most recent attendance the actor may see, newest date first.

    Default limit: 7 rows for own history, 10 rows for team/all views.
    """

    resolver = CapabilityResolver(actor, source.employees)
    names = {e.id: e.name for e in source.employees}
    records = sorted(
        (r for r in source.attendance_records if resolver.can_access(Capability.VIEW_ATTENDANCE, r.employee_id)),
        key=lambda r: r.date,
        reverse=True,
    )
    if limit is None:
        limit = history_limit(actor, source)
    return tuple(
        AttendanceRow(record=r, employee_name=names.get(r.employee_id, ""), is_today=r.date == today)
        for r in records[:limit]
    )


def today_record(actor: Employee, source: EntitySource, today: date) -> Optional[AttendanceRecord]:
    return next(
        (r for r in source.attendance_records if r.employee_id == actor.id and r.date == today),
        None,
    )


def is_working(actor: Employee, source: EntitySource, today: date) -> bool:
    """Clocked in today and not clocked out yet."""
    rec = today_record(actor, source, today)
    return bool(rec and rec.is_open)


def can_clock_in(actor: Employee, source: EntitySource, today: date) -> bool:
    rec = today_record(actor, source, today)
    return rec is None or rec.clock_in is None


def can_clock_out(actor: Employee, source: EntitySource, today: date) -> bool:
    return is_working(actor, source, today)
