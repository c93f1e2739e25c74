from __future__ import annotations

from datetime import date

import pytest

from src.hr_portal.hr_portal.attendance.model import AttendanceRecord
from src.hr_portal.hr_portal.core.enums import Role
from src.hr_portal.hr_portal.core.exceptions import RequestFailed
from src.hr_portal.hr_portal.employees.model import Employee
from src.hr_portal.hr_portal.holidays.model import Holiday
from src.hr_portal.hr_portal.leaves.model import LeaveRequest
from src.hr_portal.hr_portal.session.service import SessionState
from src.hr_portal.hr_portal.session.storage import MemorySessionStorage
from src.hr_portal.hr_portal.store.entity_store import EntityStore
from src.hr_portal.hr_portal.store.workspace import Workspace


class FakeGateway:
    """In-memory stand-in for the remote API, records every call."""

    def __init__(self, *, employees=(), leaves=(), attendance=(), holidays=(), passwords=None):
        self.employees = [e.to_api() for e in employees]
        self.leaves = [r.to_api() for r in leaves]
        self.attendance = [a.to_api() for a in attendance]
        self.holidays = [h.to_api() for h in holidays]
        self.passwords = dict(passwords or {})
        self.calls = []
        self.fail_on = {}
        self.upsert_returns_id = False
        self._next_id = 100

    def _call(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail_on:
            raise self.fail_on[name]

    def _new_id(self) -> str:
        self._next_id += 1
        return str(self._next_id)

    def login(self, email, password):
        self._call("login", email)
        for raw in self.employees:
            if raw["email"] == email and self.passwords.get(email) == password:
                return Employee.from_api(raw)
        raise RequestFailed("Invalid credentials", status_code=401)

    def register(self, employee, *, password):
        self._call("register", employee.email, password)
        if any(raw["email"] == employee.email for raw in self.employees):
            raise RequestFailed("Email already exists", status_code=409)
        new_id = self._new_id()
        raw = employee.to_api(password=password)
        raw.pop("password")
        raw["id"] = new_id
        self.employees.append(raw)
        return new_id

    def list_employees(self):
        self._call("list_employees")
        return [Employee.from_api(r) for r in self.employees]

    def list_leave_requests(self):
        self._call("list_leave_requests")
        return [LeaveRequest.from_api(r) for r in self.leaves]

    def create_leave_request(self, draft):
        self._call("create_leave_request", draft)
        new_id = self._new_id()
        raw = draft.to_api()
        raw.update({"id": new_id, "status": "pending", "employeeId": str(raw["employeeId"])})
        self.leaves.append(raw)
        return new_id

    def update_leave_request(self, request_id, changes):
        self._call("update_leave_request", request_id, dict(changes))
        for raw in self.leaves:
            if str(raw["id"]) == str(request_id):
                raw.update(changes)

    def list_attendance(self):
        self._call("list_attendance")
        return [AttendanceRecord.from_api(r) for r in self.attendance]

    def upsert_attendance(self, payload):
        self._call("upsert_attendance", dict(payload))
        for raw in self.attendance:
            if str(raw["employeeId"]) == str(payload["employeeId"]) and raw["date"] == payload["date"]:
                raw.update(payload)
                raw["employeeId"] = str(raw["employeeId"])
                return str(raw["id"]) if self.upsert_returns_id else None
        raw = dict(payload)
        raw["id"] = self._new_id()
        raw["employeeId"] = str(raw["employeeId"])
        self.attendance.append(raw)
        return raw["id"] if self.upsert_returns_id else None

    def list_holidays(self):
        self._call("list_holidays")
        return [Holiday.from_api(r) for r in self.holidays]

    def create_holiday(self, draft):
        self._call("create_holiday", draft)
        new_id = self._new_id()
        raw = draft.to_api()
        raw["id"] = new_id
        self.holidays.append(raw)
        return new_id

    def remove_holiday(self, holiday_id):
        self._call("remove_holiday", holiday_id)
        self.holidays = [h for h in self.holidays if str(h["id"]) != str(holiday_id)]

    def call_names(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def people():
    admin = Employee(
        id="9",
        email="root@corp.test",
        name="Ada Admin",
        role=Role.ADMIN,
        department="HR",
        position="Director",
        joining_date=date(2020, 1, 1),
    )
    manager = Employee(
        id="2",
        email="mia@corp.test",
        name="Mia Manager",
        role=Role.MANAGER,
        department="Engineering",
        position="Lead",
        joining_date=date(2021, 3, 1),
    )
    alice = Employee(
        id="1",
        email="alice@corp.test",
        name="alice",
        role=Role.EMPLOYEE,
        department="Engineering",
        position="Developer",
        joining_date=date(2022, 6, 15),
        manager_id="2",
    )
    bob = Employee(
        id="3",
        email="bob@corp.test",
        name="Bob",
        role=Role.EMPLOYEE,
        department="Sales",
        position="Rep",
        joining_date=date(2023, 2, 1),
        manager_id="9",
    )
    return {"admin": admin, "manager": manager, "alice": alice, "bob": bob}


@pytest.fixture
def gateway(people):
    return FakeGateway(
        employees=list(people.values()),
        passwords={e.email: "secret" for e in people.values()},
    )


@pytest.fixture
def store(gateway):
    s = EntityStore(gateway, load_workers=1)
    s.load()
    return s


@pytest.fixture
def workspace_for(gateway):
    """Build a signed-in workspace for the given employee."""

    def _build(employee):
        storage = MemorySessionStorage(employee.to_api())
        ws = Workspace(SessionState(gateway, storage), lambda: EntityStore(gateway, load_workers=1))
        return ws

    return _build
