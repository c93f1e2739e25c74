from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import hours_between, now_local
from ..core.enums import AttendanceStatus, Capability
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..store.workspace import Workspace
from ..views import attendance as attendance_views
from ..views.capabilities import CapabilityResolver
from .model import AttendanceRecord, NewAttendanceRecord

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: clock in / clock out for the signed-in employee."""

    def __init__(self, workspace: Workspace):
        self._workspace = workspace

    def today_record(self, actor: Employee, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        today = today or now_local().date()
        return attendance_views.today_record(actor, self._workspace.store, today)

    def is_working(self, actor: Employee, *, today: Optional[date] = None) -> bool:
        today = today or now_local().date()
        return attendance_views.is_working(actor, self._workspace.store, today)

    def clock_in(self, actor: Employee, *, now: Optional[datetime] = None) -> AttendanceRecord:
        """Open today's record.

        Clocking in twice on the same day is a no-op that returns the
        existing record.
        """

        now = now or now_local()
        today = now.date()
        store = self._workspace.store
        CapabilityResolver(actor, store.employees).require(Capability.CLOCK_ATTENDANCE, actor.id)

        existing = attendance_views.today_record(actor, store, today)
        if existing and existing.clock_in is not None:
            logger.info("Employee %s already clocked in on %s", actor.id, today)
            return existing

        return store.add_attendance_record(
            NewAttendanceRecord(
                employee_id=actor.id,
                date=today,
                clock_in=now.time().replace(microsecond=0),
                status=AttendanceStatus.PRESENT,
            )
        )

    def clock_out(self, actor: Employee, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()
        store = self._workspace.store
        CapabilityResolver(actor, store.employees).require(Capability.CLOCK_ATTENDANCE, actor.id)

        record = attendance_views.today_record(actor, store, today)
        if not record or record.clock_in is None:
            raise ValidationError("You have not clocked in today")
        if record.clock_out is not None:
            raise ValidationError("You have already clocked out today")

        clock_out = now.time().replace(microsecond=0)
        working_hours = hours_between(record.clock_in, clock_out, on=today)
        if working_hours < 0:
            raise ValidationError("Clock-out time cannot be before clock-in time")

        return store.update_attendance_record(record.id, clock_out=clock_out, working_hours=working_hours)
