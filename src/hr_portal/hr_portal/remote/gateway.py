from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..attendance.model import AttendanceRecord, NewAttendanceRecord
from ..employees.model import Employee, NewEmployee
from ..holidays.model import Holiday, NewHoliday
from ..leaves.model import LeaveRequest, NewLeaveRequest


class RemoteGateway(Protocol):
    """Interface to the remote HR API.

    Note (DIP): the store and session depend on this interface, not on a
    concrete HTTP client. Every method either returns the parsed result or
    raises a ``GatewayError``; none of them touches local state.
    """

    # Auth
    def login(self, email: str, password: str) -> Employee:
        raise NotImplementedError

    def register(self, employee: NewEmployee, *, password: str) -> Optional[str]:
        raise NotImplementedError

    # Employees
    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    # Leave requests
    def list_leave_requests(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def create_leave_request(self, draft: NewLeaveRequest) -> str:
        """Return the server-issued id."""

        raise NotImplementedError

    def update_leave_request(self, request_id: str, changes: Mapping[str, Any]) -> None:
        raise NotImplementedError

    # Attendance
    def list_attendance(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert_attendance(self, payload: Mapping[str, Any]) -> Optional[str]:
        """Return the server id when the API reports one."""

        raise NotImplementedError

    # Holidays
    def list_holidays(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def create_holiday(self, draft: NewHoliday) -> str:
        raise NotImplementedError

    def remove_holiday(self, holiday_id: str) -> None:
        raise NotImplementedError
