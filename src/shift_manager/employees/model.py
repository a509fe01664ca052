from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    employee_id: int
    name: str
    hourly_wage: int
    created_at: Optional[str] = None
