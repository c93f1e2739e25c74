from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.enums import Capability
from ..employees.model import Employee
from .capabilities import CapabilityResolver


@dataclass(frozen=True)
class MenuItem:
    path: str
    label: str
    capability: Capability


MENU: Tuple[MenuItem, ...] = (
    MenuItem("/dashboard", "Dashboard", Capability.VIEW_DASHBOARD),
    MenuItem("/employees", "Employees", Capability.VIEW_DIRECTORY),
    MenuItem("/add-employee", "Add Employee", Capability.ADD_EMPLOYEE),
    MenuItem("/attendance", "Attendance", Capability.VIEW_ATTENDANCE),
    MenuItem("/leaves", "Leave Requests", Capability.REQUEST_LEAVE),
    MenuItem("/leave-approvals", "Leave Approvals", Capability.APPROVE_LEAVE),
    MenuItem("/holidays", "Holidays", Capability.VIEW_HOLIDAYS),
    MenuItem("/settings", "Settings", Capability.VIEW_SETTINGS),
)


def menu_for(actor: Employee) -> Tuple[MenuItem, ...]:
    resolver = CapabilityResolver(actor, ())
    return tuple(item for item in MENU if resolver.can(item.capability))
