from __future__ import annotations

from datetime import timedelta
from typing import Optional, Sequence

from ..common.calendar_grid import filter_month, validate_year_month
from ..common.datetime_utils import DEFAULT_UTC_OFFSET, format_time_of_day, parse_hhmm, to_date_key
from ..common.validators import require_date, require_int
from ..common.work_duration import format_duration
from ..core.enums import ShiftRequestStatus
from ..core.exceptions import AuthorizationError, ValidationError
from .model import ShiftRequest
from .repository import ShiftRequestRepository


class ShiftRequestService:
    """Use cases around shift preferences.

    Employees submit and withdraw their own preferences; the owner reviews
    them month by month and approves or rejects pending ones.
    """

    def __init__(self, requests: ShiftRequestRepository, *, offset: timedelta = DEFAULT_UTC_OFFSET):
        self._requests = requests
        self._offset = offset

    def submit(self, *, employee_id: int, work_date: str, start_time: str, end_time: str) -> ShiftRequest:
        employee_id = require_int(employee_id, "Employee", minimum=1)
        work_date = require_date(work_date, "Date")
        start = parse_hhmm(start_time, "Start time")
        end = parse_hhmm(end_time, "End time")
        if start is None or end is None:
            raise ValidationError("Start and end time are required")

        return self._requests.create(
            employee_id=employee_id,
            work_date=work_date,
            preferred_start_time=str(start),
            preferred_end_time=str(end),
        )

    def list_for_employee(self, employee_id: int) -> Sequence[ShiftRequest]:
        employee_id = int(employee_id)
        # /shift-requests returns every request; filter here
        rows = [r for r in self._requests.list(employee_id=employee_id) if r.employee_id == employee_id]
        return sorted(rows, key=lambda r: to_date_key(r.work_date, offset=self._offset) or "")

    def list_month(self, year: int, month: int, *, employee_id: Optional[int] = None) -> Sequence[ShiftRequest]:
        year, month = validate_year_month(year, month)
        rows = self._requests.list(employee_id=employee_id, year=year, month=month)
        if employee_id is not None:
            rows = [r for r in rows if r.employee_id == int(employee_id)]
        return filter_month(rows, "work_date", year, month, offset=self._offset)

    def withdraw(self, *, employee_id: int, request_id: int) -> None:
        req = self._requests.get_by_id(int(request_id))
        if not req:
            raise ValidationError("Shift request not found")
        if req.employee_id != int(employee_id):
            raise AuthorizationError("You can only withdraw your own requests")
        self._requests.delete(req.request_id)

    def approve(self, request_id: int) -> None:
        self._decide(request_id, ShiftRequestStatus.APPROVED)

    def reject(self, request_id: int) -> None:
        self._decide(request_id, ShiftRequestStatus.REJECTED)

    def _decide(self, request_id: int, status: ShiftRequestStatus) -> None:
        req = self._requests.get_by_id(int(request_id))
        if not req:
            raise ValidationError("Shift request not found")
        if req.status != ShiftRequestStatus.PENDING:
            raise ValidationError("This request has already been decided")
        self._requests.update_status(req.request_id, status=status)

    def to_view(self, req: ShiftRequest) -> dict:
        start = format_time_of_day(req.preferred_start_time, offset=self._offset)
        end = format_time_of_day(req.preferred_end_time, offset=self._offset)
        return {
            "id": req.request_id,
            "employee_id": req.employee_id,
            "employee_name": req.employee_name or "",
            "date": to_date_key(req.work_date, offset=self._offset) or "",
            "start_time": start,
            "end_time": end,
            "duration": format_duration(start, end),
            "status": req.status.value,
        }


def pending_count(requests: Sequence[ShiftRequest], *, employee_id: Optional[int] = None) -> int:
    return sum(
        1
        for r in requests
        if r.status == ShiftRequestStatus.PENDING and (employee_id is None or r.employee_id == employee_id)
    )
