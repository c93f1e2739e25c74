from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import fields, replace
from datetime import date, datetime
from typing import Any, Callable, Optional, Tuple

from ..attendance.model import AttendanceRecord, NewAttendanceRecord
from ..common.datetime_utils import now_local
from ..common.wire import patch_to_wire
from ..core.constants import DEFAULT_LOAD_WORKERS
from ..core.enums import LeaveStatus, LoadState
from ..core.exceptions import GatewayError, ValidationError
from ..employees.model import Employee
from ..holidays.model import Holiday, NewHoliday
from ..leaves.model import LeaveRequest, NewLeaveRequest
from ..remote.gateway import RemoteGateway

logger = logging.getLogger(__name__)

_LEAVE_FIELDS = {f.name for f in fields(LeaveRequest)} - {"id"}
_ATTENDANCE_FIELDS = {f.name for f in fields(AttendanceRecord)} - {"id"}


class EntityStore:
    """Client-side cache of the four HR collections.

    Every mutation is write-through-then-merge: the remote call runs first
    and the local collection only changes once it succeeded. Collections
    are exposed as tuples of frozen records, so readers never share mutable
    state with the store.
    """

    def __init__(
        self,
        gateway: RemoteGateway,
        *,
        load_workers: int = DEFAULT_LOAD_WORKERS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._gateway = gateway
        self._load_workers = max(1, int(load_workers))
        self._clock = clock
        self._lock = threading.RLock()

        self._employees: Tuple[Employee, ...] = ()
        self._leave_requests: Tuple[LeaveRequest, ...] = ()
        self._attendance: Tuple[AttendanceRecord, ...] = ()
        self._holidays: Tuple[Holiday, ...] = ()

        self._state = LoadState.IDLE
        self._load_error: Optional[Exception] = None

    # Read side
    @property
    def employees(self) -> Tuple[Employee, ...]:
        return self._employees

    @property
    def leave_requests(self) -> Tuple[LeaveRequest, ...]:
        return self._leave_requests

    @property
    def attendance_records(self) -> Tuple[AttendanceRecord, ...]:
        return self._attendance

    @property
    def holidays(self) -> Tuple[Holiday, ...]:
        return self._holidays

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def load_error(self) -> Optional[Exception]:
        return self._load_error

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self._employees if e.id == str(employee_id)), None)

    def get_leave_request(self, request_id: str) -> Optional[LeaveRequest]:
        return next((r for r in self._leave_requests if r.id == str(request_id)), None)

    def get_attendance_record(self, record_id: str) -> Optional[AttendanceRecord]:
        return next((r for r in self._attendance if r.id == str(record_id)), None)

    def find_attendance(self, employee_id: str, day: date) -> Optional[AttendanceRecord]:
        return next(
            (r for r in self._attendance if r.employee_id == str(employee_id) and r.date == day),
            None,
        )

    # Initial load
    def load(self) -> LoadState:
        """Fetch all four collections in parallel.

        On any failure every collection stays empty and the state becomes
        FAILED with ``load_error`` set; calling ``load()`` again retries.
        """

        with self._lock:
            self._state = LoadState.LOADING
            self._load_error = None

        logger.info("Loading employees, leave requests, attendance and holidays")
        try:
            with ThreadPoolExecutor(max_workers=self._load_workers, thread_name_prefix="store-load") as pool:
                f_emps = pool.submit(self._gateway.list_employees)
                f_leaves = pool.submit(self._gateway.list_leave_requests)
                f_atts = pool.submit(self._gateway.list_attendance)
                f_hols = pool.submit(self._gateway.list_holidays)
                emps, leaves, atts, hols = f_emps.result(), f_leaves.result(), f_atts.result(), f_hols.result()
        except (GatewayError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Initial load failed: %s", e)
            with self._lock:
                self._employees = ()
                self._leave_requests = ()
                self._attendance = ()
                self._holidays = ()
                self._state = LoadState.FAILED
                self._load_error = e
            return self._state

        with self._lock:
            self._employees = tuple(emps)
            self._leave_requests = tuple(leaves)
            self._attendance = tuple(atts)
            self._holidays = tuple(hols)
            self._state = LoadState.READY
        logger.info(
            "Loaded %d employees, %d leave requests, %d attendance records, %d holidays",
            len(self._employees),
            len(self._leave_requests),
            len(self._attendance),
            len(self._holidays),
        )
        return self._state

    def refresh_employees(self) -> Tuple[Employee, ...]:
        emps = tuple(self._gateway.list_employees())
        with self._lock:
            self._employees = emps
        return emps

    # Leave requests
    def add_leave_request(self, draft: NewLeaveRequest) -> LeaveRequest:
        if draft.days < 1:
            raise ValidationError("End date must not be before start date")

        new_id = self._gateway.create_leave_request(draft)
        record = draft.to_record(new_id)
        with self._lock:
            self._leave_requests = (record,) + self._leave_requests
        return record

    def update_leave_request(self, request_id: str, **changes: Any) -> Optional[LeaveRequest]:
        """Patch a leave request remotely, then merge the patch locally.

        Returns the merged local record, or None when the request is not
        cached locally (the remote patch still happened).
        """

        unknown = set(changes) - _LEAVE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown leave request fields: {', '.join(sorted(unknown))}")
        if "status" in changes:
            changes["status"] = LeaveStatus(changes["status"])

        current = self.get_leave_request(request_id)
        if current and "status" in changes and changes["status"] != current.status and not current.is_pending:
            raise ValidationError(f"Leave request already {current.status.value}")

        self._gateway.update_leave_request(str(request_id), patch_to_wire(changes))

        merged = None
        with self._lock:
            items = []
            for r in self._leave_requests:
                if r.id == str(request_id):
                    r = merged = replace(r, **changes)
                items.append(r)
            self._leave_requests = tuple(items)
        return merged

    # Attendance
    def add_attendance_record(self, draft: NewAttendanceRecord) -> AttendanceRecord:
        new_id = self._gateway.upsert_attendance(draft.to_api())
        if new_id is None:
            new_id = self._reconcile_attendance_id(draft)
        if new_id is None:
            new_id = str(int(self._clock().timestamp() * 1000))
            logger.warning(
                "No server id for attendance of employee %s on %s, using provisional id %s",
                draft.employee_id,
                draft.date,
                new_id,
            )

        record = draft.to_record(new_id)
        with self._lock:
            others = tuple(
                r for r in self._attendance if not (r.employee_id == record.employee_id and r.date == record.date)
            )
            self._attendance = (record,) + others
        return record

    def _reconcile_attendance_id(self, draft: NewAttendanceRecord) -> Optional[str]:
        """Look up the id the server gave the (employee, date) record."""

        try:
            remote = self._gateway.list_attendance()
        except GatewayError as e:
            logger.warning("Could not reconcile attendance id: %s", e)
            return None
        match = next(
            (r for r in remote if r.employee_id == draft.employee_id and r.date == draft.date),
            None,
        )
        if match:
            logger.debug("Adopted server id %s for attendance %s/%s", match.id, draft.employee_id, draft.date)
            return match.id
        return None

    def update_attendance_record(self, record_id: str, **changes: Any) -> AttendanceRecord:
        unknown = set(changes) - _ATTENDANCE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown attendance fields: {', '.join(sorted(unknown))}")

        existing = self.get_attendance_record(record_id)
        if not existing:
            raise ValidationError("Attendance record not found")

        merged = replace(existing, **changes)
        server_id = self._gateway.upsert_attendance(merged.to_upsert())
        if server_id and server_id != existing.id:
            merged = replace(merged, id=server_id)

        with self._lock:
            self._attendance = tuple(merged if r.id == existing.id else r for r in self._attendance)
        return merged

    # Holidays
    def add_holiday(self, draft: NewHoliday) -> Holiday:
        new_id = self._gateway.create_holiday(draft)
        holiday = draft.to_record(new_id)
        with self._lock:
            self._holidays = self._holidays + (holiday,)
        return holiday

    def remove_holiday(self, holiday_id: str) -> None:
        self._gateway.remove_holiday(str(holiday_id))
        with self._lock:
            self._holidays = tuple(h for h in self._holidays if h.id != str(holiday_id))
