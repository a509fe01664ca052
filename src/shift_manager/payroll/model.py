from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkInterval:
    """One worked (or scheduled) interval fed into payroll.

    ``start``/``end`` accept anything the time normalizer understands.
    ``work_date`` is only needed for per-day overtime.
    """

    start: Any
    end: Any
    break_minutes: int = 0
    work_date: Optional[date] = None

    def __post_init__(self):
        if int(self.break_minutes) < 0:
            raise ValidationError("Break minutes cannot be negative")


@dataclass(frozen=True)
class PayrollLine:
    """Hours and salary for one employee.

    Values are exact decimals; rounding happens only when displayed.
    """

    employee_id: Optional[int]
    gross_hours: Decimal
    break_minutes_total: int
    net_hours: Decimal
    hourly_wage: int
    total_salary: Decimal
    shift_count: int


@dataclass(frozen=True)
class MonthlyPayrollLine(PayrollLine):
    overtime_hours: Decimal
    work_days: int


@dataclass(frozen=True)
class PayrollSummary:
    """Backend-computed payroll row (``/payroll/calculate``)."""

    employee_id: int
    employee_name: str
    total_hours: float
    total_break_time: int
    net_hours: float
    hourly_wage: int
    total_salary: int
    shift_count: int
