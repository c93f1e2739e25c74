from __future__ import annotations

import json
from datetime import date

import pytest
import requests

from src.hr_portal.hr_portal.core.enums import LeaveType, LoadState, Role
from src.hr_portal.hr_portal.core.exceptions import RequestFailed, TransportFailure
from src.hr_portal.hr_portal.holidays.model import NewHoliday
from src.hr_portal.hr_portal.leaves.model import NewLeaveRequest
from src.hr_portal.hr_portal.remote.connection import ApiConfig, ApiConnection
from src.hr_portal.hr_portal.remote.http_gateway import HttpGateway
from src.hr_portal.hr_portal.store.entity_store import EntityStore


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self.text = text if text is not None else (json.dumps(payload) if payload is not None else "")
        self.content = self.text.encode()

    def json(self):
        return json.loads(self.text)


class FakeHttpSession:
    def __init__(self, *responses):
        self._responses = list(responses)
        self.sent = []

    def request(self, method, url, json=None, params=None):
        self.sent.append({"method": method, "url": url, "json": json, "params": params})
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


def _gateway(*responses):
    http = FakeHttpSession(*responses)
    conn = ApiConnection(ApiConfig(base_url="https://hr.test/api/"), session=http)
    return HttpGateway(conn), http


def test_login_posts_credentials_and_parses_user():
    gw, http = _gateway(
        FakeResponse(
            payload={
                "user": {
                    "id": 1,
                    "email": "alice@corp.test",
                    "name": "alice",
                    "role": "employee",
                    "department": "Eng",
                    "position": "Dev",
                    "joiningDate": "2022-06-15",
                    "managerId": 2,
                }
            }
        )
    )

    user = gw.login("alice@corp.test", "secret")

    assert user.id == "1"
    assert user.manager_id == "2"
    assert user.role == Role.EMPLOYEE
    assert user.joining_date == date(2022, 6, 15)
    assert http.sent[0]["method"] == "POST"
    assert http.sent[0]["url"] == "https://hr.test/api/auth.php"
    assert http.sent[0]["params"] == {"action": "login"}
    assert http.sent[0]["json"] == {"email": "alice@corp.test", "password": "secret"}


def test_non_2xx_raises_request_failed_with_body_text():
    gw, _ = _gateway(FakeResponse(status_code=409, text="Email already exists"))

    with pytest.raises(RequestFailed) as exc:
        gw.list_employees()

    assert exc.value.body == "Email already exists"
    assert exc.value.status_code == 409


def test_transport_error_becomes_transport_failure():
    gw, _ = _gateway(requests.ConnectionError("connection refused"))

    with pytest.raises(TransportFailure):
        gw.list_holidays()


def test_create_leave_sends_wire_shape_and_returns_server_id():
    gw, http = _gateway(FakeResponse(payload={"id": 42}))
    draft = NewLeaveRequest(
        employee_id="1",
        employee_name="alice",
        type=LeaveType.SICK,
        start_date=date(2024, 1, 10),
        end_date=date(2024, 1, 12),
        reason="flu",
        applied_date=date(2024, 1, 9),
    )

    new_id = gw.create_leave_request(draft)

    assert new_id == "42"
    body = http.sent[0]["json"]
    assert body["employeeId"] == 1
    assert body["days"] == 3
    assert body["startDate"] == "2024-01-10"
    assert body["type"] == "sick"


def test_update_leave_patches_with_id_in_body():
    gw, http = _gateway(FakeResponse(payload={"success": True}))

    gw.update_leave_request("7", {"status": "approved", "comments": "ok"})

    assert http.sent[0]["method"] == "PATCH"
    assert http.sent[0]["json"] == {"id": 7, "status": "approved", "comments": "ok"}


def test_remove_holiday_uses_query_id():
    gw, http = _gateway(FakeResponse(payload={"success": True}))

    gw.remove_holiday("5")

    assert http.sent[0]["method"] == "DELETE"
    assert http.sent[0]["params"] == {"id": 5}


def test_create_holiday_without_id_in_response_is_rejected():
    gw, _ = _gateway(FakeResponse(payload={"success": True}))

    with pytest.raises(RequestFailed):
        gw.create_holiday(NewHoliday(name="New Year", date=date(2025, 1, 1)))


def test_attendance_list_parses_clock_times():
    gw, _ = _gateway(
        FakeResponse(
            payload=[
                {
                    "id": "3",
                    "employeeId": "1",
                    "date": "2024-01-10",
                    "clockIn": "09:00:00",
                    "clockOut": None,
                    "status": "present",
                }
            ]
        )
    )

    [rec] = gw.list_attendance()

    assert rec.clock_in.hour == 9
    assert rec.clock_out is None
    assert rec.working_hours is None
    assert rec.is_open


@pytest.mark.parametrize("method", ["list_employees", "list_leave_requests", "list_attendance", "list_holidays"])
def test_malformed_row_is_a_request_failure(method):
    gw, _ = _gateway(FakeResponse(payload=[1]))

    with pytest.raises(RequestFailed, match="Malformed row"):
        getattr(gw, method)()


def test_malformed_rows_end_the_load_as_failed():
    gw, _ = _gateway(*(FakeResponse(payload=[1]) for _ in range(4)))
    store = EntityStore(gw, load_workers=1)

    assert store.load() == LoadState.FAILED
    assert isinstance(store.load_error, RequestFailed)
    assert store.employees == ()
