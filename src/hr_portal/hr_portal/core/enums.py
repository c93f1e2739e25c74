from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of an employee, drives every visibility rule."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class LeaveType(str, Enum):
    ANNUAL = "annual"
    SICK = "sick"
    PERSONAL = "personal"
    MATERNITY = "maternity"
    EMERGENCY = "emergency"


class LeaveStatus(str, Enum):
    """Approval flow: PENDING is initial, APPROVED/REJECTED are terminal."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half-day"
    LATE = "late"


class HolidayType(str, Enum):
    PUBLIC = "public"
    COMPANY = "company"
    OPTIONAL = "optional"


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class Relation(str, Enum):
    """How a subject employee relates to the acting employee."""

    SELF = "self"
    DIRECT_REPORT = "direct_report"
    OTHER = "other"


class Capability(str, Enum):
    VIEW_DASHBOARD = "view_dashboard"
    VIEW_DIRECTORY = "view_directory"
    VIEW_EMPLOYEE = "view_employee"
    ADD_EMPLOYEE = "add_employee"
    VIEW_ATTENDANCE = "view_attendance"
    CLOCK_ATTENDANCE = "clock_attendance"
    VIEW_LEAVE = "view_leave"
    REQUEST_LEAVE = "request_leave"
    APPROVE_LEAVE = "approve_leave"
    VIEW_HOLIDAYS = "view_holidays"
    MANAGE_HOLIDAYS = "manage_holidays"
    VIEW_SETTINGS = "view_settings"
