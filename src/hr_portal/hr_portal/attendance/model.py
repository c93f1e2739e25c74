from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_clock_time, parse_iso_date
from ..common.wire import drop_empty, to_wire, wire_id
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar date.

    Created open on clock-in (no ``clock_out``), closed once on clock-out
    which also fills ``working_hours``.
    """

    id: str
    employee_id: str
    date: date
    status: AttendanceStatus
    clock_in: Optional[time] = None
    clock_out: Optional[time] = None
    working_hours: Optional[float] = None

    @property
    def is_open(self) -> bool:
        return self.clock_in is not None and self.clock_out is None

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "AttendanceRecord":
        hours = raw.get("workingHours")
        return cls(
            id=str(raw["id"]),
            employee_id=str(raw["employeeId"]),
            date=parse_iso_date(raw["date"]),
            status=AttendanceStatus(raw.get("status") or AttendanceStatus.PRESENT.value),
            clock_in=parse_clock_time(raw.get("clockIn")),
            clock_out=parse_clock_time(raw.get("clockOut")),
            working_hours=float(hours) if hours not in (None, "") else None,
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "date": to_wire(self.date),
            "clockIn": to_wire(self.clock_in),
            "clockOut": to_wire(self.clock_out),
            "status": self.status.value,
            "workingHours": self.working_hours,
        }

    def to_upsert(self) -> dict:
        """Full record body for the upsert endpoint."""
        payload = self.to_api()
        payload["id"] = wire_id(self.id)
        payload["employeeId"] = wire_id(self.employee_id)
        return drop_empty(payload)


@dataclass(frozen=True)
class NewAttendanceRecord:
    employee_id: str
    date: date
    status: AttendanceStatus = AttendanceStatus.PRESENT
    clock_in: Optional[time] = None
    clock_out: Optional[time] = None
    working_hours: Optional[float] = None

    def to_api(self) -> dict:
        return drop_empty(
            {
                "employeeId": wire_id(self.employee_id),
                "date": to_wire(self.date),
                "clockIn": to_wire(self.clock_in),
                "clockOut": to_wire(self.clock_out),
                "status": self.status.value,
                "workingHours": self.working_hours,
            }
        )

    def to_record(self, record_id: str) -> AttendanceRecord:
        return AttendanceRecord(
            id=record_id,
            employee_id=self.employee_id,
            date=self.date,
            status=self.status,
            clock_in=self.clock_in,
            clock_out=self.clock_out,
            working_hours=self.working_hours,
        )
