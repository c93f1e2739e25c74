from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_optional_date
from ..common.wire import drop_empty, local_id, to_wire, wire_id
from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee profile as returned by the API.

    ``manager_id`` points at the direct manager; the links form a forest.
    """

    id: str
    email: str
    name: str
    role: Role
    department: str
    position: str
    joining_date: Optional[date]
    manager_id: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "Employee":
        return cls(
            id=str(raw["id"]),
            email=str(raw.get("email") or ""),
            name=str(raw.get("name") or ""),
            role=Role(raw.get("role") or Role.EMPLOYEE.value),
            department=str(raw.get("department") or ""),
            position=str(raw.get("position") or ""),
            joining_date=parse_optional_date(raw.get("joiningDate")),
            manager_id=local_id(raw.get("managerId")),
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "department": self.department,
            "position": self.position,
            "joiningDate": to_wire(self.joining_date),
            "managerId": self.manager_id,
        }


@dataclass(frozen=True)
class NewEmployee:
    email: str
    name: str
    role: Role
    department: str
    position: str
    joining_date: date
    manager_id: Optional[str] = None

    def to_api(self, *, password: str) -> dict:
        return drop_empty(
            {
                "email": self.email,
                "name": self.name,
                "role": self.role.value,
                "department": self.department,
                "position": self.position,
                "joiningDate": to_wire(self.joining_date),
                "managerId": wire_id(self.manager_id) if self.manager_id else None,
                "password": password,
            }
        )
