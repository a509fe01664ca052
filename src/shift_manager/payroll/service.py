from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.calendar_grid import month_bounds
from ..common.datetime_utils import DEFAULT_UTC_OFFSET, parse_iso_date, to_date_key
from ..common.work_duration import format_decimal_hours
from ..wages.repository import HourlyWageRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import MonthlyPayrollLine, PayrollLine, PayrollSummary, WorkInterval
from .repository import PayrollRepository


def round_display(value, places: int = 1) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_currency(value) -> int:
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class PayrollReport:
    year: int
    month: int
    rows: list[dict]
    total_net_hours: float
    total_salary: int


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        attendance: AttendanceRepository,
        wages: HourlyWageRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        offset: timedelta = DEFAULT_UTC_OFFSET,
    ):
        self._payroll = payroll
        self._attendance = attendance
        self._wages = wages
        self._calculator = calculator or StandardPayrollCalculator(offset=offset)
        self._offset = offset

    def monthly_report(self, year: int, month: int, *, employee_id: Optional[int] = None) -> PayrollReport:
        """Owner view: backend payroll rows for the month plus totals."""

        first, _ = month_bounds(year, month)
        summaries = self._payroll.calculate(year=first.year, month=first.month, employee_id=employee_id)
        rows = [self.summary_to_view(s) for s in sorted(summaries, key=lambda s: s.employee_id)]

        return PayrollReport(
            year=first.year,
            month=first.month,
            rows=rows,
            total_net_hours=total_net_hours(summaries),
            total_salary=sum(int(s.total_salary) for s in summaries),
        )

    def employee_payroll(self, employee_id: int, year: int, month: int) -> Optional[dict]:
        first, _ = month_bounds(year, month)
        summary = self._payroll.for_employee(int(employee_id), year=first.year, month=first.month)
        return self.summary_to_view(summary) if summary else None

    def employee_month_line(self, employee_id: int, year: int, month: int) -> MonthlyPayrollLine:
        """Locally computed hours, salary and overtime from attendance records."""

        first, last = month_bounds(year, month)
        records = self._attendance.list(
            employee_id=int(employee_id),
            start_date=first.isoformat(),
            end_date=last.isoformat(),
        )

        intervals = []
        for r in records:
            if not r.clock_in_time or not r.clock_out_time:
                continue
            key = to_date_key(r.work_date, offset=self._offset)
            intervals.append(
                WorkInterval(
                    start=r.clock_in_time,
                    end=r.clock_out_time,
                    work_date=parse_iso_date(key) if key else None,
                )
            )

        wage = self._wages.current(int(employee_id))
        hourly_wage = wage.hourly_wage if wage else 0
        return self._calculator.aggregate_monthly(intervals, hourly_wage, employee_id=int(employee_id))

    @staticmethod
    def summary_to_view(s: PayrollSummary) -> dict:
        return {
            "employee_id": s.employee_id,
            "employee_name": s.employee_name,
            "total_hours": round_display(s.total_hours),
            "total_break_time": s.total_break_time,
            "net_hours": round_display(s.net_hours),
            "net_hours_hhmm": format_decimal_hours(s.net_hours),
            "hourly_wage": s.hourly_wage,
            "total_salary": s.total_salary,
            "shift_count": s.shift_count,
        }

    @staticmethod
    def line_to_view(line: PayrollLine) -> dict:
        view = {
            "employee_id": line.employee_id,
            "gross_hours": round_display(line.gross_hours),
            "break_minutes_total": line.break_minutes_total,
            "net_hours": round_display(line.net_hours),
            "net_hours_hhmm": format_decimal_hours(line.net_hours),
            "hourly_wage": line.hourly_wage,
            "total_salary": round_currency(line.total_salary),
            "shift_count": line.shift_count,
        }
        if isinstance(line, MonthlyPayrollLine):
            view["overtime_hours"] = round_display(line.overtime_hours)
            view["work_days"] = line.work_days
        return view


def total_net_hours(summaries: Sequence[PayrollSummary]) -> float:
    return round_display(sum(Decimal(str(s.net_hours)) for s in summaries))
