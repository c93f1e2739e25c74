from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from ..core.enums import Capability, Relation, Role
from ..core.exceptions import AuthorizationError
from ..employees.model import Employee

ANY: FrozenSet[Relation] = frozenset(Relation)
SELF_ONLY: FrozenSet[Relation] = frozenset({Relation.SELF})
TEAM_ONLY: FrozenSet[Relation] = frozenset({Relation.DIRECT_REPORT})
SELF_AND_TEAM: FrozenSet[Relation] = frozenset({Relation.SELF, Relation.DIRECT_REPORT})

# capability -> role -> relations the role may act on. A missing role means denied.
RULES: Dict[Capability, Dict[Role, FrozenSet[Relation]]] = {
    Capability.VIEW_DASHBOARD: {Role.ADMIN: ANY, Role.MANAGER: ANY, Role.EMPLOYEE: ANY},
    Capability.VIEW_DIRECTORY: {Role.ADMIN: ANY, Role.MANAGER: ANY},
    Capability.VIEW_EMPLOYEE: {Role.ADMIN: ANY, Role.MANAGER: SELF_AND_TEAM, Role.EMPLOYEE: SELF_AND_TEAM},
    Capability.ADD_EMPLOYEE: {Role.ADMIN: ANY},
    Capability.VIEW_ATTENDANCE: {Role.ADMIN: ANY, Role.MANAGER: TEAM_ONLY, Role.EMPLOYEE: SELF_ONLY},
    Capability.CLOCK_ATTENDANCE: {Role.EMPLOYEE: SELF_ONLY},
    Capability.VIEW_LEAVE: {Role.ADMIN: ANY, Role.MANAGER: TEAM_ONLY, Role.EMPLOYEE: SELF_ONLY},
    Capability.REQUEST_LEAVE: {Role.ADMIN: SELF_ONLY, Role.MANAGER: SELF_ONLY, Role.EMPLOYEE: SELF_ONLY},
    Capability.APPROVE_LEAVE: {Role.ADMIN: ANY, Role.MANAGER: TEAM_ONLY},
    Capability.VIEW_HOLIDAYS: {Role.ADMIN: ANY, Role.MANAGER: ANY, Role.EMPLOYEE: ANY},
    Capability.MANAGE_HOLIDAYS: {Role.ADMIN: ANY, Role.MANAGER: ANY},
    Capability.VIEW_SETTINGS: {Role.ADMIN: ANY, Role.MANAGER: ANY, Role.EMPLOYEE: ANY},
}


class CapabilityResolver:
    """Single place that answers "may this actor do X to that employee?".

    Every role-scoped view goes through here instead of branching on the
    role itself.
    """

    def __init__(self, actor: Employee, employees: Iterable[Employee]):
        self.actor = actor
        self._by_id: Dict[str, Employee] = {e.id: e for e in employees}

    @property
    def role(self) -> Role:
        return self.actor.role

    @property
    def team(self) -> Tuple[Employee, ...]:
        """Employees whose manager is the actor."""
        return tuple(e for e in self._by_id.values() if e.manager_id == self.actor.id)

    def relation_to(self, employee_id: Optional[str]) -> Relation:
        if employee_id is None:
            return Relation.OTHER
        employee_id = str(employee_id)
        if employee_id == self.actor.id:
            return Relation.SELF
        subject = self._by_id.get(employee_id)
        if subject is not None and subject.manager_id == self.actor.id:
            return Relation.DIRECT_REPORT
        return Relation.OTHER

    def allows(self, capability: Capability, relation: Relation) -> bool:
        return relation in RULES.get(capability, {}).get(self.role, frozenset())

    def can(self, capability: Capability) -> bool:
        """True when the capability is granted for at least one relation."""
        return bool(RULES.get(capability, {}).get(self.role))

    def can_access(self, capability: Capability, employee_id: Optional[str]) -> bool:
        return self.allows(capability, self.relation_to(employee_id))

    def require(self, capability: Capability, employee_id: Optional[str] = None) -> None:
        granted = self.can(capability) if employee_id is None else self.can_access(capability, employee_id)
        if not granted:
            raise AuthorizationError("You do not have access to this page")
