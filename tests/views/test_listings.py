from datetime import date, time, timedelta

import pytest

from src.hr_portal.hr_portal.attendance.model import AttendanceRecord
from src.hr_portal.hr_portal.core.enums import AttendanceStatus, HolidayType, LeaveStatus, LeaveType, Role
from src.hr_portal.hr_portal.core.exceptions import AuthorizationError, ValidationError
from src.hr_portal.hr_portal.employees.model import Employee
from src.hr_portal.hr_portal.holidays.model import Holiday
from src.hr_portal.hr_portal.leaves.model import LeaveRequest
from src.hr_portal.hr_portal.views import attendance as attendance_views
from src.hr_portal.hr_portal.views.employees import management_chain, managers, visible_employees, would_cycle
from src.hr_portal.hr_portal.views.holidays import filter_holidays, upcoming_holidays
from src.hr_portal.hr_portal.views.leaves import (
    approval_queue,
    leave_day_preview,
    parse_status_filter,
    visible_leave_requests,
)
from src.hr_portal.hr_portal.views.source import Snapshot

TODAY = date(2024, 5, 15)


def _leave(rid, employee_id, status=LeaveStatus.PENDING, applied=date(2024, 5, 1)):
    return LeaveRequest(
        id=rid,
        employee_id=employee_id,
        employee_name="x",
        type=LeaveType.SICK,
        start_date=date(2024, 5, 20),
        end_date=date(2024, 5, 20),
        days=1,
        reason="",
        status=status,
        applied_date=applied,
    )


# Attendance
def _history(employee_id, n):
    return tuple(
        AttendanceRecord(
            id=f"{employee_id}-{i}",
            employee_id=employee_id,
            date=TODAY - timedelta(days=i),
            status=AttendanceStatus.PRESENT,
            clock_in=time(9, 0),
            clock_out=time(17, 0),
            working_hours=8.0,
        )
        for i in range(n)
    )


def test_employee_sees_own_last_seven_days(people):
    source = Snapshot(employees=tuple(people.values()), attendance_records=_history("1", 12) + _history("3", 3))

    rows = attendance_views.visible_attendance(people["alice"], source, today=TODAY)

    assert len(rows) == 7
    assert {r.record.employee_id for r in rows} == {"1"}
    assert rows[0].is_today and rows[0].record.date == TODAY
    assert rows[0].to_dict()["employeeName"] == "alice"


def test_manager_sees_team_capped_at_ten(people):
    source = Snapshot(
        employees=tuple(people.values()),
        attendance_records=_history("1", 12) + _history("2", 2) + _history("3", 3),
    )

    rows = attendance_views.visible_attendance(people["manager"], source, today=TODAY)

    assert len(rows) == 10
    assert {r.record.employee_id for r in rows} == {"1"}


def test_admin_sees_everyone(people):
    source = Snapshot(employees=tuple(people.values()), attendance_records=_history("1", 2) + _history("3", 2))

    rows = attendance_views.visible_attendance(people["admin"], source, today=TODAY)

    assert {r.record.employee_id for r in rows} == {"1", "3"}


def test_clock_flags_follow_todays_record(people):
    alice = people["alice"]
    open_rec = AttendanceRecord("a", "1", TODAY, AttendanceStatus.PRESENT, clock_in=time(9, 0))
    source = Snapshot(employees=(alice,), attendance_records=(open_rec,))

    assert attendance_views.is_working(alice, source, TODAY)
    assert not attendance_views.can_clock_in(alice, source, TODAY)
    assert attendance_views.can_clock_out(alice, source, TODAY)

    empty = Snapshot(employees=(alice,))
    assert attendance_views.can_clock_in(alice, empty, TODAY)
    assert not attendance_views.can_clock_out(alice, empty, TODAY)


# Leave
def test_visible_leaves_newest_first_and_scoped(people):
    source = Snapshot(
        employees=tuple(people.values()),
        leave_requests=(
            _leave("old", "1", applied=date(2024, 1, 1)),
            _leave("new", "1", applied=date(2024, 4, 1)),
            _leave("bob", "3"),
        ),
    )

    assert [r.id for r in visible_leave_requests(people["alice"], source)] == ["new", "old"]
    assert [r.id for r in visible_leave_requests(people["admin"], source)] == ["bob", "new", "old"]


def test_approval_queue_filters_by_status(people):
    source = Snapshot(
        employees=tuple(people.values()),
        leave_requests=(_leave("p", "1"), _leave("a", "1", status=LeaveStatus.APPROVED), _leave("bob", "3")),
    )

    assert [r.id for r in approval_queue(people["manager"], source)] == ["p"]
    assert {r.id for r in approval_queue(people["manager"], source, status=None)} == {"p", "a"}
    assert [r.id for r in approval_queue(people["manager"], source, status="approved")] == ["a"]
    assert {r.id for r in approval_queue(people["admin"], source, status="all")} == {"p", "a", "bob"}


def test_approval_queue_denied_for_employee(people):
    with pytest.raises(AuthorizationError):
        approval_queue(people["alice"], Snapshot(employees=tuple(people.values())))


def test_status_filter_parsing():
    assert parse_status_filter(None) is None
    assert parse_status_filter("All") is None
    assert parse_status_filter("rejected") == LeaveStatus.REJECTED
    with pytest.raises(ValidationError):
        parse_status_filter("cancelled")


def test_leave_day_preview():
    assert leave_day_preview(date(2024, 1, 10), date(2024, 1, 12)) == 3
    assert leave_day_preview(date(2024, 1, 10), date(2024, 1, 10)) == 1
    assert leave_day_preview(date(2024, 1, 12), date(2024, 1, 10)) == 0
    assert leave_day_preview(None, date(2024, 1, 10)) == 0


# Holidays
HOLIDAYS = (
    Holiday("3", "Christmas", date(2024, 12, 25), HolidayType.PUBLIC),
    Holiday("1", "New Year", date(2024, 1, 1), HolidayType.PUBLIC),
    Holiday("2", "Offsite", TODAY, HolidayType.COMPANY),
)


def test_holiday_filters():
    assert [h.id for h in filter_holidays(HOLIDAYS, TODAY)] == ["1", "2", "3"]
    assert [h.id for h in filter_holidays(HOLIDAYS, TODAY, "upcoming")] == ["2", "3"]
    assert [h.id for h in filter_holidays(HOLIDAYS, TODAY, "past")] == ["1"]
    with pytest.raises(ValidationError):
        filter_holidays(HOLIDAYS, TODAY, "someday")


def test_upcoming_holidays_limit():
    assert [h.id for h in upcoming_holidays(HOLIDAYS, TODAY, limit=1)] == ["2"]


# Employees
def test_directory_for_manager_is_self_and_reports(people):
    source = Snapshot(employees=tuple(people.values()))

    rows = visible_employees(people["manager"], source)

    assert {r.employee.id for r in rows} == {"1", "2"}
    alice_row = next(r for r in rows if r.employee.id == "1")
    assert alice_row.manager_name == "Mia Manager"
    assert alice_row.to_dict()["managerName"] == "Mia Manager"


def test_directory_for_employee_is_self_and_own_reports(people):
    mentee = Employee("5", "dan@corp.test", "Dan", Role.EMPLOYEE, "Engineering", "Intern", None, manager_id="1")
    source = Snapshot(employees=tuple(people.values()) + (mentee,))

    rows = visible_employees(people["alice"], source)

    assert {r.employee.id for r in rows} == {"1", "5"}
    assert next(r for r in rows if r.employee.id == "5").manager_name == "alice"


def test_directory_for_admin_lists_everyone(people):
    rows = visible_employees(people["admin"], Snapshot(employees=tuple(people.values())))

    assert len(rows) == 4


def test_unknown_manager_shows_placeholder(people):
    orphan = Employee("8", "o@corp.test", "Orphan", Role.EMPLOYEE, "Ops", "Tech", None, manager_id="77")

    rows = visible_employees(people["admin"], Snapshot(employees=(people["admin"], orphan)))

    assert next(r for r in rows if r.employee.id == "8").manager_name == "Manager"


def test_managers_and_chain(people):
    employees = tuple(people.values())

    assert [m.id for m in managers(employees)] == ["2"]
    assert [e.id for e in management_chain("1", employees)] == ["2"]
    assert would_cycle("2", "1", employees)
    assert would_cycle("1", "1", employees)
    assert not would_cycle("3", "2", employees)


def test_chain_survives_cycles():
    a = Employee("a", "a@x", "A", Role.MANAGER, "", "", None, manager_id="b")
    b = Employee("b", "b@x", "B", Role.MANAGER, "", "", None, manager_id="a")

    assert [e.id for e in management_chain("a", (a, b))] == ["b"]
