from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..attendance.service import AttendanceService
from ..common.calendar_grid import filter_month, month_bounds
from ..common.datetime_utils import DEFAULT_UTC_OFFSET, to_date_key
from ..employees.repository import EmployeeRepository
from ..payroll.service import PayrollService
from ..shift_requests.repository import ShiftRequestRepository
from ..shift_requests.service import pending_count
from ..shifts.repository import ShiftRepository


class DashboardService:
    """Read-only summaries shown on the landing page of each role."""

    def __init__(
        self,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        requests: ShiftRequestRepository,
        attendance_service: AttendanceService,
        payroll_service: PayrollService,
        *,
        offset: timedelta = DEFAULT_UTC_OFFSET,
    ):
        self._employees = employees
        self._shifts = shifts
        self._requests = requests
        self._attendance = attendance_service
        self._payroll = payroll_service
        self._offset = offset

    def owner_stats(self, today: date) -> dict:
        first, last = month_bounds(today.year, today.month)

        shifts = self._shifts.list_month(year=first.year, month=first.month)
        scheduled_days = {
            key
            for key in (to_date_key(s.work_date, offset=self._offset) for s in shifts)
            if key and key.startswith(first.isoformat()[:7])
        }
        report = self._payroll.monthly_report(first.year, first.month)
        requests = filter_month(
            self._requests.list(year=first.year, month=first.month),
            "work_date",
            first.year,
            first.month,
            offset=self._offset,
        )

        return {
            "year": first.year,
            "month": first.month,
            "employee_count": len(self._employees.list_all()),
            "unassigned_days": last.day - len(scheduled_days),
            "total_net_hours": report.total_net_hours,
            "total_salary": report.total_salary,
            "pending_shift_requests": pending_count(requests),
        }

    def employee_stats(self, employee_id: int, today: date) -> dict:
        record = self._attendance.get_today_record(employee_id, today)
        line = self._payroll.employee_month_line(employee_id, today.year, today.month)
        requests = filter_month(
            self._requests.list(employee_id=int(employee_id), year=today.year, month=today.month),
            "work_date",
            today.year,
            today.month,
            offset=self._offset,
        )

        today_view: Optional[dict] = self._attendance.to_ui(record) if record else None
        return {
            "date": today.isoformat(),
            "today": today_view,
            "clocked_in": bool(record and record.clock_in_time),
            "clocked_out": bool(record and record.clock_out_time),
            "month": self._payroll.line_to_view(line),
            "pending_shift_requests": pending_count(requests, employee_id=int(employee_id)),
        }
