from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from ..core.enums import Capability, Role
from ..employees.model import Employee
from .capabilities import CapabilityResolver
from .source import EntitySource


@dataclass(frozen=True)
class EmployeeRow:
    employee: Employee
    manager_name: Optional[str]

    def to_dict(self) -> dict:
        data = self.employee.to_api()
        data["managerName"] = self.manager_name
        return data


def visible_employees(actor: Employee, source: EntitySource) -> Tuple[EmployeeRow, ...]:
    """Everyone for admins; otherwise the actor and their direct reports."""
    resolver = CapabilityResolver(actor, source.employees)
    by_id = {e.id: e for e in source.employees}
    rows = []
    for e in source.employees:
        if not resolver.can_access(Capability.VIEW_EMPLOYEE, e.id):
            continue
        manager = by_id.get(e.manager_id) if e.manager_id else None
        # Unknown manager ids still show as "Manager" in the directory.
        rows.append(EmployeeRow(employee=e, manager_name=manager.name if manager else ("Manager" if e.manager_id else None)))
    return tuple(rows)


def managers(employees: Iterable[Employee]) -> Tuple[Employee, ...]:
    return tuple(e for e in employees if e.role == Role.MANAGER)


def management_chain(employee_id: str, employees: Iterable[Employee]) -> Tuple[Employee, ...]:
    """Managers above ``employee_id``, nearest first.

    Stops at the first repeated id, so malformed data with a cycle cannot
    loop forever.
    """

    by_id: Dict[str, Employee] = {e.id: e for e in employees}
    chain = []
    seen = {str(employee_id)}
    current = by_id.get(str(employee_id))
    while current is not None and current.manager_id and current.manager_id not in seen:
        seen.add(current.manager_id)
        current = by_id.get(current.manager_id)
        if current is not None:
            chain.append(current)
    return tuple(chain)


def would_cycle(employee_id: str, manager_id: Optional[str], employees: Iterable[Employee]) -> bool:
    """True if making ``manager_id`` the manager of ``employee_id`` closes a loop."""
    if not manager_id:
        return False
    if str(manager_id) == str(employee_id):
        return True
    return any(m.id == str(employee_id) for m in management_chain(manager_id, employees))
