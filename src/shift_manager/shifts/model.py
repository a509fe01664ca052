from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """A work interval assigned by the owner.

    Times are kept as the backend sent them (UTC instant or local clock
    string) and normalized when displayed.
    """

    shift_id: int
    employee_id: int
    work_date: str
    start_time: str
    end_time: str
    break_minutes: int = 0
    employee_name: Optional[str] = None
