from datetime import date, time

from src.hr_portal.hr_portal.attendance.model import AttendanceRecord
from src.hr_portal.hr_portal.core.enums import AttendanceStatus, HolidayType, LeaveStatus, LeaveType, Role
from src.hr_portal.hr_portal.holidays.model import Holiday
from src.hr_portal.hr_portal.leaves.model import LeaveRequest
from src.hr_portal.hr_portal.views.dashboard import build_dashboard
from src.hr_portal.hr_portal.views.source import Snapshot

TODAY = date(2024, 5, 15)


def _leave(rid, employee_id, status=LeaveStatus.PENDING, applied=date(2024, 5, 1)):
    return LeaveRequest(
        id=rid,
        employee_id=employee_id,
        employee_name=f"emp-{employee_id}",
        type=LeaveType.ANNUAL,
        start_date=date(2024, 6, 3),
        end_date=date(2024, 6, 4),
        days=2,
        reason="",
        status=status,
        applied_date=applied,
    )


def _att(rid, employee_id, day, status=AttendanceStatus.PRESENT):
    return AttendanceRecord(id=rid, employee_id=employee_id, date=day, status=status, clock_in=time(9, 0))


def _source(people):
    return Snapshot(
        employees=tuple(people.values()),
        leave_requests=(
            _leave("l1", "1"),
            _leave("l2", "1", status=LeaveStatus.APPROVED),
            _leave("l3", "3"),
            _leave("l4", "2"),
        ),
        attendance_records=(
            _att("a1", "1", TODAY),
            _att("a2", "3", TODAY),
            _att("a3", "1", date(2024, 5, 2)),
            _att("a4", "1", date(2024, 4, 30)),
            _att("a5", "2", TODAY, status=AttendanceStatus.LATE),
        ),
        holidays=(
            Holiday("h1", "Past", date(2024, 1, 1), HolidayType.PUBLIC),
            Holiday("h2", "Today", TODAY, HolidayType.COMPANY),
            Holiday("h3", "Summer", date(2024, 7, 4), HolidayType.PUBLIC),
            Holiday("h4", "Autumn", date(2024, 10, 2), HolidayType.OPTIONAL),
            Holiday("h5", "Winter", date(2024, 12, 25), HolidayType.PUBLIC),
        ),
    )


def test_admin_dashboard_counts_everyone(people):
    view = build_dashboard(people["admin"], _source(people), today=TODAY)

    assert view.role == Role.ADMIN
    assert view.stat("total_employees") == 4
    assert view.stat("pending_leaves") == 3
    assert view.stat("present_today") == 2
    assert view.stat("upcoming_holidays") == 3


def test_manager_dashboard_counts_direct_reports_only(people):
    view = build_dashboard(people["manager"], _source(people), today=TODAY)

    assert view.stat("team_size") == 1
    assert view.stat("pending_approvals") == 1
    assert view.stat("team_present_today") == 1
    assert view.stat("total_employees") is None


def test_employee_dashboard_counts_own_records(people):
    view = build_dashboard(people["alice"], _source(people), today=TODAY)

    assert view.stat("total_leaves") == 2
    assert view.stat("pending_leaves") == 1
    assert view.stat("monthly_attendance") == 2
    assert {r.employee_id for r in view.recent_leaves} == {"1"}


def test_upcoming_holidays_include_today_and_cap_at_three(people):
    view = build_dashboard(people["alice"], _source(people), today=TODAY)

    assert [h.id for h in view.upcoming_holidays] == ["h2", "h3", "h4"]


def test_dashboard_to_dict_exposes_stats(people):
    data = build_dashboard(people["manager"], _source(people), today=TODAY).to_dict()

    assert data["role"] == "manager"
    assert data["stats"]["team_size"] == 1
    assert len(data["cards"]) == 4
    assert data["upcomingHolidays"][0]["name"] == "Today"


def test_empty_store_yields_zero_cards(people):
    view = build_dashboard(people["admin"], Snapshot(employees=(people["admin"],)), today=TODAY)

    assert view.stat("pending_leaves") == 0
    assert view.stat("upcoming_holidays") == 0
    assert view.recent_leaves == ()
