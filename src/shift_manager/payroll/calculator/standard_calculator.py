from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from typing import Iterable, Optional

from ...common.datetime_utils import DEFAULT_UTC_OFFSET
from ...common.work_duration import compute_duration
from ...core.constants import DEFAULT_OVERTIME_DAILY_HOURS
from ..model import MonthlyPayrollLine, PayrollLine, WorkInterval
from .base import PayrollCalculator


def _hours(minutes: int) -> Decimal:
    return Decimal(int(minutes)) / 60


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: (out - in) - break, not below 0, times the hourly wage.

    Overtime is counted per calendar day above a fixed daily threshold.
    """

    def __init__(
        self,
        *,
        offset: timedelta = DEFAULT_UTC_OFFSET,
        overtime_daily_hours: int = DEFAULT_OVERTIME_DAILY_HOURS,
    ):
        self._offset = offset
        self._overtime_minutes = int(overtime_daily_hours) * 60

    def worked_minutes(self, interval: WorkInterval) -> int:
        return compute_duration(interval.start, interval.end, offset=self._offset).total_minutes

    def aggregate(
        self,
        intervals: Iterable[WorkInterval],
        hourly_wage: int,
        *,
        employee_id: Optional[int] = None,
    ) -> PayrollLine:
        intervals = list(intervals)
        gross = sum(self.worked_minutes(i) for i in intervals)
        breaks = sum(int(i.break_minutes) for i in intervals)
        net_hours = _hours(max(gross - breaks, 0))

        return PayrollLine(
            employee_id=employee_id,
            gross_hours=_hours(gross),
            break_minutes_total=breaks,
            net_hours=net_hours,
            hourly_wage=int(hourly_wage),
            total_salary=net_hours * int(hourly_wage),
            shift_count=len(intervals),
        )

    def aggregate_monthly(
        self,
        intervals: Iterable[WorkInterval],
        hourly_wage: int,
        *,
        employee_id: Optional[int] = None,
    ) -> MonthlyPayrollLine:
        intervals = list(intervals)
        line = self.aggregate(intervals, hourly_wage, employee_id=employee_id)

        # day key -> [gross minutes, break minutes]; undated intervals are their own day
        per_day: dict[object, list[int]] = {}
        for idx, interval in enumerate(intervals):
            key = interval.work_date if interval.work_date is not None else ("undated", idx)
            totals = per_day.setdefault(key, [0, 0])
            totals[0] += self.worked_minutes(interval)
            totals[1] += int(interval.break_minutes)

        overtime = 0
        work_days = 0
        for gross, breaks in per_day.values():
            if gross > 0:
                work_days += 1
            overtime += max(0, max(gross - breaks, 0) - self._overtime_minutes)

        return MonthlyPayrollLine(
            employee_id=line.employee_id,
            gross_hours=line.gross_hours,
            break_minutes_total=line.break_minutes_total,
            net_hours=line.net_hours,
            hourly_wage=line.hourly_wage,
            total_salary=line.total_salary,
            shift_count=line.shift_count,
            overtime_hours=_hours(overtime),
            work_days=work_days,
        )
