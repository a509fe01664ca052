from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HourlyWage:
    wage_id: int
    employee_id: int
    hourly_wage: int
    effective_date: str
    employee_name: Optional[str] = None
