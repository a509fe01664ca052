from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ShiftRequestStatus


@dataclass(frozen=True)
class ShiftRequest:
    """An employee's preferred work interval for a day (not an assigned shift)."""

    request_id: int
    employee_id: int
    work_date: str
    preferred_start_time: str
    preferred_end_time: str
    status: ShiftRequestStatus
    employee_name: Optional[str] = None
