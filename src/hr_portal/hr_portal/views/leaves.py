from __future__ import annotations

from datetime import date
from typing import Optional, Tuple, Union

from ..common.datetime_utils import inclusive_days
from ..core.enums import Capability, LeaveStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..leaves.model import LeaveRequest
from .capabilities import CapabilityResolver
from .source import EntitySource

StatusFilter = Union[LeaveStatus, str]


def parse_status_filter(value: Optional[str]) -> Optional[LeaveStatus]:
    """'all' (or empty) -> None, otherwise a LeaveStatus."""
    v = (value or "all").strip().lower()
    if v == "all":
        return None
    try:
        return LeaveStatus(v)
    except ValueError:
        raise ValidationError(f"Unknown status filter: {value}") from None


def _newest_first(requests) -> Tuple[LeaveRequest, ...]:
    return tuple(sorted(requests, key=lambda r: r.applied_date, reverse=True))


def visible_leave_requests(actor: Employee, source: EntitySource) -> Tuple[LeaveRequest, ...]:
    """Leave requests the actor may see, most recently applied first."""
    resolver = CapabilityResolver(actor, source.employees)
    return _newest_first(r for r in source.leave_requests if resolver.can_access(Capability.VIEW_LEAVE, r.employee_id))


def recent_leave_requests(actor: Employee, source: EntitySource, *, limit: int) -> Tuple[LeaveRequest, ...]:
    return visible_leave_requests(actor, source)[:limit]


def approval_queue(
    actor: Employee,
    source: EntitySource,
    status: Optional[StatusFilter] = LeaveStatus.PENDING,
) -> Tuple[LeaveRequest, ...]:
    """Requests the actor may decide on, filtered by status (None = all).

    Raises AuthorizationError for roles without approval rights.
    """

    resolver = CapabilityResolver(actor, source.employees)
    resolver.require(Capability.APPROVE_LEAVE)
    if isinstance(status, str) and not isinstance(status, LeaveStatus):
        status = parse_status_filter(status)

    items = (r for r in source.leave_requests if resolver.can_access(Capability.APPROVE_LEAVE, r.employee_id))
    if status is not None:
        items = (r for r in items if r.status == status)
    return _newest_first(items)


def leave_day_preview(start: Optional[date], end: Optional[date]) -> int:
    """Day count shown on the request form; 0 while the range is incomplete or inverted."""
    if not start or not end:
        return 0
    return max(inclusive_days(start, end), 0)
