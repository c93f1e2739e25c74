from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import inclusive_days, parse_iso_date, parse_optional_date
from ..common.wire import to_wire, wire_id
from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    """Domain entity: a leave request.

    ``employee_name`` is a snapshot taken at submission time and is never
    re-synced with the employee profile. The approval fields are only set
    once the request leaves PENDING.
    """

    id: str
    employee_id: str
    employee_name: str
    type: LeaveType
    start_date: date
    end_date: date
    days: int
    reason: str
    status: LeaveStatus
    applied_date: date
    approved_by: Optional[str] = None
    approved_date: Optional[date] = None
    comments: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.status == LeaveStatus.PENDING

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "LeaveRequest":
        start = parse_iso_date(raw["startDate"])
        end = parse_iso_date(raw["endDate"])
        days = raw.get("days")
        return cls(
            id=str(raw["id"]),
            employee_id=str(raw["employeeId"]),
            employee_name=str(raw.get("employeeName") or ""),
            type=LeaveType(raw.get("type") or LeaveType.ANNUAL.value),
            start_date=start,
            end_date=end,
            days=int(days) if days not in (None, "") else inclusive_days(start, end),
            reason=str(raw.get("reason") or ""),
            status=LeaveStatus(raw.get("status") or LeaveStatus.PENDING.value),
            applied_date=parse_iso_date(raw["appliedDate"]),
            approved_by=raw.get("approvedBy") or None,
            approved_date=parse_optional_date(raw.get("approvedDate")),
            comments=raw.get("comments") or None,
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "type": self.type.value,
            "startDate": to_wire(self.start_date),
            "endDate": to_wire(self.end_date),
            "days": self.days,
            "reason": self.reason,
            "status": self.status.value,
            "appliedDate": to_wire(self.applied_date),
            "approvedBy": self.approved_by,
            "approvedDate": to_wire(self.approved_date),
            "comments": self.comments,
        }


@dataclass(frozen=True)
class NewLeaveRequest:
    employee_id: str
    employee_name: str
    type: LeaveType
    start_date: date
    end_date: date
    reason: str
    applied_date: date

    @property
    def days(self) -> int:
        return inclusive_days(self.start_date, self.end_date)

    def to_api(self) -> dict:
        return {
            "employeeId": wire_id(self.employee_id),
            "employeeName": self.employee_name,
            "type": self.type.value,
            "startDate": to_wire(self.start_date),
            "endDate": to_wire(self.end_date),
            "days": self.days,
            "reason": self.reason or "",
            "appliedDate": to_wire(self.applied_date),
        }

    def to_record(self, request_id: str) -> LeaveRequest:
        return LeaveRequest(
            id=request_id,
            employee_id=self.employee_id,
            employee_name=self.employee_name,
            type=self.type,
            start_date=self.start_date,
            end_date=self.end_date,
            days=self.days,
            reason=self.reason,
            status=LeaveStatus.PENDING,
            applied_date=self.applied_date,
        )

