from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.validators import require_email, require_non_empty
from ..core.enums import Capability, Role
from ..core.exceptions import ValidationError
from ..session.service import AuthResult
from ..store.workspace import Workspace
from ..views.capabilities import CapabilityResolver
from .model import Employee, NewEmployee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: admins register new employees."""

    def __init__(self, workspace: Workspace, *, default_password: str):
        self._workspace = workspace
        self._default_password = default_password

    def add_employee(
        self,
        actor: Employee,
        *,
        name: str,
        email: str,
        role: Role | str,
        department: str,
        position: str,
        joining_date: date,
        manager_id: Optional[str] = None,
    ) -> AuthResult:
        """Register an account with the default password, then refresh the directory.

        A rejected registration (usually a duplicate email) comes back as a
        failed ``AuthResult``; validation problems raise before any call.
        """

        store = self._workspace.store
        CapabilityResolver(actor, store.employees).require(Capability.ADD_EMPLOYEE)

        name = require_non_empty(name, "Full name")
        email = require_email(email)
        department = require_non_empty(department, "Department")
        position = require_non_empty(position, "Position")
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("Invalid role") from None

        manager_id = str(manager_id).strip() if manager_id else None
        if manager_id and store.get_employee(manager_id) is None:
            raise ValidationError("Selected manager does not exist")

        new_employee = NewEmployee(
            email=email,
            name=name,
            role=role,
            department=department,
            position=position,
            joining_date=joining_date,
            manager_id=manager_id,
        )
        result = self._workspace.session.register(new_employee, password=self._default_password)
        if result:
            store.refresh_employees()
            logger.info("Registered %s as %s", email, role.value)
        return result
