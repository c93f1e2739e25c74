from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.validators import require_non_empty
from ..core.enums import Capability, HolidayType
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..store.workspace import Workspace
from ..views.capabilities import CapabilityResolver
from .model import Holiday, NewHoliday


class HolidayService:
    """Use case: admins and managers maintain the holiday calendar."""

    def __init__(self, workspace: Workspace):
        self._workspace = workspace

    def add(
        self,
        actor: Employee,
        *,
        name: str,
        on: date,
        holiday_type: HolidayType | str = HolidayType.PUBLIC,
        description: Optional[str] = None,
    ) -> Holiday:
        store = self._workspace.store
        CapabilityResolver(actor, store.employees).require(Capability.MANAGE_HOLIDAYS)

        name = require_non_empty(name, "Holiday name")
        try:
            holiday_type = HolidayType(holiday_type)
        except ValueError:
            raise ValidationError("Invalid holiday type") from None

        return store.add_holiday(
            NewHoliday(name=name, date=on, type=holiday_type, description=(description or "").strip() or None)
        )

    def remove(self, actor: Employee, holiday_id: str) -> None:
        store = self._workspace.store
        CapabilityResolver(actor, store.employees).require(Capability.MANAGE_HOLIDAYS)
        store.remove_holiday(holiday_id)
