from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import inclusive_days, now_local
from ..common.validators import require_non_empty
from ..core.enums import Capability, LeaveStatus, LeaveType
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..store.workspace import Workspace
from ..views.capabilities import CapabilityResolver
from .model import LeaveRequest, NewLeaveRequest


class LeaveService:
    """Use cases: submit a leave request, approve or reject one."""

    def __init__(self, workspace: Workspace):
        self._workspace = workspace

    def submit(
        self,
        actor: Employee,
        *,
        leave_type: LeaveType | str,
        start_date: date,
        end_date: date,
        reason: str,
        today: Optional[date] = None,
    ) -> LeaveRequest:
        store = self._workspace.store
        CapabilityResolver(actor, store.employees).require(Capability.REQUEST_LEAVE, actor.id)

        try:
            leave_type = LeaveType(leave_type)
        except ValueError:
            raise ValidationError("Invalid leave type") from None

        if inclusive_days(start_date, end_date) < 1:
            raise ValidationError("End date must be on or after start date")
        reason = require_non_empty(reason, "Reason")

        draft = NewLeaveRequest(
            employee_id=actor.id,
            employee_name=actor.name,
            type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            applied_date=today or now_local().date(),
        )
        return store.add_leave_request(draft)

    def approve(self, actor: Employee, request_id: str, *, comments: str = "", today: Optional[date] = None) -> LeaveRequest:
        return self._decide(actor, request_id, LeaveStatus.APPROVED, comments=comments, today=today)

    def reject(self, actor: Employee, request_id: str, *, comments: str = "", today: Optional[date] = None) -> LeaveRequest:
        return self._decide(actor, request_id, LeaveStatus.REJECTED, comments=comments, today=today)

    def _decide(
        self,
        actor: Employee,
        request_id: str,
        status: LeaveStatus,
        *,
        comments: str,
        today: Optional[date],
    ) -> LeaveRequest:
        store = self._workspace.store
        req = store.get_leave_request(request_id)
        if not req:
            raise ValidationError("Leave request not found")

        CapabilityResolver(actor, store.employees).require(Capability.APPROVE_LEAVE, req.employee_id)
        if not req.is_pending:
            raise ValidationError(f"Leave request already {req.status.value}")

        return store.update_leave_request(
            req.id,
            status=status,
            approved_by=actor.name,
            approved_date=today or now_local().date(),
            comments=(comments or "").strip() or None,
        )
