from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Clock-in/clock-out record for one employee and day."""

    attendance_id: int
    employee_id: int
    work_date: str
    clock_in_time: Optional[str]
    clock_out_time: Optional[str]
    status: str
    actual_hours: Optional[float] = None
    employee_name: Optional[str] = None
