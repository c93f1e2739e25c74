from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .employees.service import EmployeeService
from .holidays.service import HolidayService
from .leaves.service import LeaveService
from .remote.connection import ApiConfig, ApiConnection
from .remote.gateway import RemoteGateway
from .remote.http_gateway import HttpGateway
from .session.service import SessionState
from .session.storage import FileSessionStorage, SessionStorage
from .store.entity_store import EntityStore
from .store.workspace import Workspace


@dataclass(frozen=True)
class Container:
    gateway: RemoteGateway
    session_storage: SessionStorage
    session: SessionState
    workspace: Workspace

    employee_service: EmployeeService
    leave_service: LeaveService
    attendance_service: AttendanceService
    holiday_service: HolidayService


def build_container(
    *,
    api_base_url: str = "",
    session_file: str = "",
    default_password: str = "123456",
    load_workers: int = 4,
    gateway: Optional[RemoteGateway] = None,
    session_storage: Optional[SessionStorage] = None,
) -> Container:
    """Wire the data layer. ``gateway``/``session_storage`` override the real ones (tests)."""

    if gateway is None:
        gateway = HttpGateway(ApiConnection.get_instance(ApiConfig(base_url=api_base_url)))
    if session_storage is None:
        session_storage = FileSessionStorage(session_file)

    session = SessionState(gateway, session_storage)
    workspace = Workspace(session, lambda: EntityStore(gateway, load_workers=load_workers))

    return Container(
        gateway=gateway,
        session_storage=session_storage,
        session=session,
        workspace=workspace,
        employee_service=EmployeeService(workspace, default_password=default_password),
        leave_service=LeaveService(workspace),
        attendance_service=AttendanceService(workspace),
        holiday_service=HolidayService(workspace),
    )
