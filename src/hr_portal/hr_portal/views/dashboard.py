from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..common.datetime_utils import same_month
from ..core.constants import DASHBOARD_RECENT_LEAVES, DASHBOARD_UPCOMING_HOLIDAYS
from ..core.enums import AttendanceStatus, Capability, LeaveStatus, Relation, Role
from ..employees.model import Employee
from ..holidays.model import Holiday
from ..leaves.model import LeaveRequest
from .capabilities import CapabilityResolver
from .holidays import upcoming_holidays
from .leaves import recent_leave_requests
from .source import EntitySource


@dataclass(frozen=True)
class StatCard:
    key: str
    title: str
    value: int


@dataclass(frozen=True)
class DashboardView:
    role: Role
    cards: Tuple[StatCard, ...]
    upcoming_holidays: Tuple[Holiday, ...]
    recent_leaves: Tuple[LeaveRequest, ...]

    def stat(self, key: str) -> Optional[int]:
        return next((c.value for c in self.cards if c.key == key), None)

    def to_dict(self) -> dict:
        return {
            "role": self.role.value,
            "stats": {c.key: c.value for c in self.cards},
            "cards": [{"key": c.key, "title": c.title, "value": c.value} for c in self.cards],
            "upcomingHolidays": [h.to_api() for h in self.upcoming_holidays],
            "recentLeaves": [r.to_api() for r in self.recent_leaves],
        }


def build_dashboard(actor: Employee, source: EntitySource, *, today: date) -> DashboardView:
    """Role-specific headline numbers.

    Admins count everyone, managers count their team (direct reports),
    employees count their own leave and this month's attendance.
    """

    resolver = CapabilityResolver(actor, source.employees)
    holidays = upcoming_holidays(source.holidays, today, limit=DASHBOARD_UPCOMING_HOLIDAYS)
    holiday_card = StatCard("upcoming_holidays", "Upcoming Holidays", len(holidays))

    if resolver.allows(Capability.APPROVE_LEAVE, Relation.DIRECT_REPORT):
        everyone = resolver.allows(Capability.APPROVE_LEAVE, Relation.OTHER)
        staff = source.employees if everyone else resolver.team
        pending = sum(
            1
            for r in source.leave_requests
            if r.status == LeaveStatus.PENDING and resolver.can_access(Capability.APPROVE_LEAVE, r.employee_id)
        )
        present = sum(
            1
            for a in source.attendance_records
            if a.date == today
            and a.status == AttendanceStatus.PRESENT
            and resolver.can_access(Capability.VIEW_ATTENDANCE, a.employee_id)
        )
        if everyone:
            cards = (
                StatCard("total_employees", "Total Employees", len(staff)),
                StatCard("pending_leaves", "Pending Leaves", pending),
                StatCard("present_today", "Present Today", present),
                holiday_card,
            )
        else:
            cards = (
                StatCard("team_size", "Team Size", len(staff)),
                StatCard("pending_approvals", "Pending Approvals", pending),
                StatCard("team_present_today", "Team Present Today", present),
                holiday_card,
            )
    else:
        mine = [r for r in source.leave_requests if r.employee_id == actor.id]
        monthly = sum(1 for a in source.attendance_records if a.employee_id == actor.id and same_month(a.date, today))
        cards = (
            StatCard("total_leaves", "Total Leave Requests", len(mine)),
            StatCard("pending_leaves", "Pending Requests", sum(1 for r in mine if r.status == LeaveStatus.PENDING)),
            StatCard("monthly_attendance", "Monthly Attendance", monthly),
            holiday_card,
        )

    return DashboardView(
        role=actor.role,
        cards=cards,
        upcoming_holidays=holidays,
        recent_leaves=recent_leave_requests(actor, source, limit=DASHBOARD_RECENT_LEAVES),
    )
