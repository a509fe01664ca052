from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional, Sequence

from ..common.calendar_grid import bucket_by_date, build_month, filter_month, validate_year_month
from ..common.datetime_utils import (
    DEFAULT_UTC_OFFSET,
    TimeOfDay,
    extract_time_of_day,
    format_time_of_day,
    parse_hhmm,
    parse_iso_date,
    to_date_key,
)
from ..common.validators import require_date, require_int
from ..common.work_duration import compute_duration
from ..core.exceptions import ValidationError
from ..shift_requests.repository import ShiftRequestRepository
from ..shift_requests.service import ShiftRequestService
from .model import Shift
from .repository import ShiftRepository


def shift_datetimes(work_date: str, start: TimeOfDay, end: TimeOfDay) -> tuple[str, str]:
    """Local start/end datetimes for a shift; an end before the start is next day."""

    day = parse_iso_date(work_date)
    end_day = day + timedelta(days=1) if end < start else day
    return f"{day.isoformat()}T{start}", f"{end_day.isoformat()}T{end}"


def _only_employee(rows: Sequence[Any], employee_id: Optional[int]) -> list[Any]:
    # /shifts and /shifts/month answer with every employee's rows
    if employee_id is None:
        return list(rows)
    return [r for r in rows if r.employee_id == int(employee_id)]


class ShiftService:
    def __init__(
        self,
        shifts: ShiftRepository,
        requests: Optional[ShiftRequestRepository] = None,
        *,
        offset: timedelta = DEFAULT_UTC_OFFSET,
    ):
        self._shifts = shifts
        self._requests = requests
        self._offset = offset

    def list_shifts(self, *, employee_id: Optional[int] = None) -> Sequence[Shift]:
        return _only_employee(self._shifts.list(employee_id=employee_id), employee_id)

    def list_month(self, year: int, month: int, *, employee_id: Optional[int] = None) -> Sequence[Shift]:
        year, month = validate_year_month(year, month)
        rows = self._shifts.list_month(year=year, month=month, employee_id=employee_id)
        return filter_month(_only_employee(rows, employee_id), "work_date", year, month, offset=self._offset)

    def create(
        self,
        *,
        employee_id: Any,
        work_date: str,
        start_time: str,
        end_time: str,
        break_minutes: Any = 0,
    ) -> Shift:
        employee_id = require_int(employee_id, "Employee", minimum=1)
        work_date = require_date(work_date, "Date")
        start = parse_hhmm(start_time, "Start time")
        end = parse_hhmm(end_time, "End time")
        if start is None or end is None:
            raise ValidationError("Start and end time are required")
        break_minutes = require_int(break_minutes or 0, "Break", minimum=0)

        start_dt, end_dt = shift_datetimes(work_date, start, end)
        return self._shifts.create(
            employee_id=employee_id,
            work_date=work_date,
            start_time=start_dt,
            end_time=end_dt,
            break_minutes=break_minutes,
        )

    def update(
        self,
        shift_id: int,
        *,
        work_date: Optional[str] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        break_minutes: Any = None,
    ) -> None:
        changes: dict[str, Any] = {}
        if work_date:
            changes["date"] = require_date(work_date, "Date")

        start = parse_hhmm(start_time, "Start time")
        end = parse_hhmm(end_time, "End time")
        if (start is None) != (end is None):
            raise ValidationError("Start and end time must be changed together")
        if start is not None and end is not None:
            if not work_date:
                raise ValidationError("Date is required when changing times")
            changes["start_time"], changes["end_time"] = shift_datetimes(changes["date"], start, end)

        if break_minutes not in (None, ""):
            changes["break_time"] = require_int(break_minutes, "Break", minimum=0)

        if not changes:
            raise ValidationError("Nothing to update")
        self._shifts.update(int(shift_id), changes)

    def delete(self, shift_id: int) -> None:
        self._shifts.delete(int(shift_id))

    def to_view(self, shift: Shift) -> dict:
        start = extract_time_of_day(shift.start_time, offset=self._offset)
        end = extract_time_of_day(shift.end_time, offset=self._offset)
        duration = compute_duration(start, end)
        net_minutes = max(duration.total_minutes - shift.break_minutes, 0)
        return {
            "id": shift.shift_id,
            "employee_id": shift.employee_id,
            "employee_name": shift.employee_name or "",
            "date": to_date_key(shift.work_date, offset=self._offset) or "",
            "start_time": format_time_of_day(start),
            "end_time": format_time_of_day(end),
            "break_minutes": shift.break_minutes,
            "duration": str(duration),
            "net_duration": f"{net_minutes // 60}:{net_minutes % 60:02d}",
        }

    def month_calendar(self, year: int, month: int, *, employee_id: Optional[int] = None) -> dict:
        """Month grid with the shifts (and shift requests) of each day."""

        year, month = validate_year_month(year, month)
        shifts = _only_employee(self._shifts.list_month(year=year, month=month, employee_id=employee_id), employee_id)
        shifts_by_day = bucket_by_date(shifts, "work_date", offset=self._offset)

        requests_by_day: dict[str, list] = {}
        request_views = None
        if self._requests:
            request_views = ShiftRequestService(self._requests, offset=self._offset)
            reqs = _only_employee(self._requests.list(year=year, month=month), employee_id)
            requests_by_day = bucket_by_date(reqs, "work_date", offset=self._offset)

        cells = []
        for cell in build_month(year, month):
            day_shifts = sorted(
                (self.to_view(s) for s in shifts_by_day.get(cell.key, [])),
                key=lambda v: (v["start_time"], v["employee_id"]),
            )
            day_requests = []
            if request_views:
                day_requests = [request_views.to_view(r) for r in requests_by_day.get(cell.key, [])]
            cells.append(
                {
                    "date": cell.key,
                    "day": cell.date.day,
                    "day_of_week": cell.day_of_week,
                    "in_current_month": cell.in_current_month,
                    "shifts": day_shifts,
                    "shift_requests": day_requests,
                }
            )

        return {"year": year, "month": month, "cells": cells}
