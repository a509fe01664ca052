from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for route gating."""

    OWNER = "owner"
    EMPLOYEE = "employee"


class TimeKind(str, Enum):
    """How a time field coming from the backend should be read."""

    UTC_INSTANT = "utc-instant"
    LOCAL_WALL_CLOCK = "local-wall-clock"


class ShiftRequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    CLOCKED_IN = "clocked_in"
    ABSENT = "absent"


class CoverageStatus(str, Enum):
    SUFFICIENT = "sufficient"
    SHORTAGE = "shortage"


class PermissionFlag(str, Enum):
    """Per-employee permission toggles managed by the owner."""

    VIEW_OTHER_SHIFTS = "can_view_other_shifts"
    VIEW_PAYROLL = "can_view_payroll"
    EDIT_ATTENDANCE = "can_edit_attendance"
    SUBMIT_SHIFT_REQUESTS = "can_submit_shift_requests"


class UndoAction(str, Enum):
    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"
