from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple

from ..attendance.model import AttendanceRecord
from ..employees.model import Employee
from ..holidays.model import Holiday
from ..leaves.model import LeaveRequest


class EntitySource(Protocol):
    """What the views read: the four collections. ``EntityStore`` fits."""

    @property
    def employees(self) -> Sequence[Employee]: ...

    @property
    def leave_requests(self) -> Sequence[LeaveRequest]: ...

    @property
    def attendance_records(self) -> Sequence[AttendanceRecord]: ...

    @property
    def holidays(self) -> Sequence[Holiday]: ...


@dataclass(frozen=True)
class Snapshot:
    """One consistent read of the collections, taken once per render."""

    employees: Tuple[Employee, ...] = ()
    leave_requests: Tuple[LeaveRequest, ...] = ()
    attendance_records: Tuple[AttendanceRecord, ...] = ()
    holidays: Tuple[Holiday, ...] = ()

    @classmethod
    def of(cls, source: EntitySource) -> "Snapshot":
        return cls(
            employees=tuple(source.employees),
            leave_requests=tuple(source.leave_requests),
            attendance_records=tuple(source.attendance_records),
            holidays=tuple(source.holidays),
        )
