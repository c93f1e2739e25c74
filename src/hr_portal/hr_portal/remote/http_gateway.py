from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, TypeVar

from ..attendance.model import AttendanceRecord
from ..common.wire import local_id, wire_id
from ..core.exceptions import RequestFailed
from ..employees.model import Employee, NewEmployee
from ..holidays.model import Holiday, NewHoliday
from ..leaves.model import LeaveRequest, NewLeaveRequest
from .connection import ApiConnection
from .gateway import RemoteGateway
from .http_base import send_json

T = TypeVar("T")


class HttpGateway(RemoteGateway):
    AUTH_PATH = "/auth.php"
    EMPLOYEES_PATH = "/employees.php"
    LEAVES_PATH = "/leaves.php"
    ATTENDANCE_PATH = "/attendance.php"
    HOLIDAYS_PATH = "/holidays.php"

    def __init__(self, conn: ApiConnection):
        self._conn = conn

    @staticmethod
    def _rows(payload: Any) -> List[Mapping[str, Any]]:
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise RequestFailed(f"Expected a list, got {type(payload).__name__}")
        return payload

    @classmethod
    def _parse_rows(cls, payload: Any, parse: Callable[[Mapping[str, Any]], T]) -> List[T]:
        """Parse every row; a malformed row fails the whole list as a remote rejection."""
        try:
            return [parse(r) for r in cls._rows(payload)]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RequestFailed(f"Malformed row in list response: {e}") from e

    @staticmethod
    def _created_id(payload: Any) -> str:
        new_id = local_id(payload.get("id")) if isinstance(payload, dict) else None
        if new_id is None:
            raise RequestFailed(f"Create response carries no id: {payload!r}")
        return new_id

    # Auth
    def login(self, email: str, password: str) -> Employee:
        payload = send_json(
            self._conn,
            "POST",
            self.AUTH_PATH,
            params={"action": "login"},
            body={"email": email, "password": password},
        )
        if not isinstance(payload, dict) or not payload.get("user"):
            raise RequestFailed(f"Login response carries no user: {payload!r}")
        try:
            return Employee.from_api(payload["user"])
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RequestFailed(f"Malformed user in login response: {e}") from e

    def register(self, employee: NewEmployee, *, password: str) -> Optional[str]:
        payload = send_json(
            self._conn,
            "POST",
            self.AUTH_PATH,
            params={"action": "register"},
            body=employee.to_api(password=password),
        )
        if isinstance(payload, dict):
            if payload.get("success") is False:
                raise RequestFailed(str(payload.get("message") or "Registration rejected"))
            return local_id(payload.get("id"))
        return None

    # Employees
    def list_employees(self) -> List[Employee]:
        return self._parse_rows(send_json(self._conn, "GET", self.EMPLOYEES_PATH), Employee.from_api)

    # Leave requests
    def list_leave_requests(self) -> List[LeaveRequest]:
        return self._parse_rows(send_json(self._conn, "GET", self.LEAVES_PATH), LeaveRequest.from_api)

    def create_leave_request(self, draft: NewLeaveRequest) -> str:
        payload = send_json(self._conn, "POST", self.LEAVES_PATH, body=draft.to_api())
        return self._created_id(payload)

    def update_leave_request(self, request_id: str, changes: Mapping[str, Any]) -> None:
        body = {"id": wire_id(request_id)}
        body.update(changes)
        send_json(self._conn, "PATCH", self.LEAVES_PATH, body=body)

    # Attendance
    def list_attendance(self) -> List[AttendanceRecord]:
        return self._parse_rows(send_json(self._conn, "GET", self.ATTENDANCE_PATH), AttendanceRecord.from_api)

    def upsert_attendance(self, payload: Mapping[str, Any]) -> Optional[str]:
        resp = send_json(self._conn, "POST", self.ATTENDANCE_PATH, body=dict(payload))
        if isinstance(resp, dict):
            return local_id(resp.get("id"))
        return None

    # Holidays
    def list_holidays(self) -> List[Holiday]:
        return self._parse_rows(send_json(self._conn, "GET", self.HOLIDAYS_PATH), Holiday.from_api)

    def create_holiday(self, draft: NewHoliday) -> str:
        payload = send_json(self._conn, "POST", self.HOLIDAYS_PATH, body=draft.to_api())
        return self._created_id(payload)

    def remove_holiday(self, holiday_id: str) -> None:
        send_json(self._conn, "DELETE", self.HOLIDAYS_PATH, params={"id": wire_id(holiday_id)})
