from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Optional, Sequence

from ..common.datetime_utils import DEFAULT_UTC_OFFSET, format_time_of_day, now_local, parse_hhmm, to_date_key
from ..common.validators import require_date, require_int
from ..common.work_duration import compute_duration
from ..core.enums import AttendanceStatus, UndoAction
from ..core.exceptions import ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, *, offset: timedelta = DEFAULT_UTC_OFFSET):
        self._attendance = attendance
        self._offset = offset

    def _now(self, now: Optional[datetime]) -> datetime:
        return now or now_local(self._offset)

    def list_records(
        self,
        *,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records newest first."""

        rows = self._attendance.list(
            employee_id=employee_id,
            start_date=start.isoformat() if start else None,
            end_date=end.isoformat() if end else None,
        )
        return sorted(rows, key=lambda r: to_date_key(r.work_date, offset=self._offset) or "", reverse=True)

    def get_today_record(self, employee_id: int, today: date) -> Optional[AttendanceRecord]:
        rows = self._attendance.list(
            employee_id=int(employee_id),
            start_date=today.isoformat(),
            end_date=today.isoformat(),
        )
        key = today.isoformat()
        for r in rows:
            if to_date_key(r.work_date, offset=self._offset) == key:
                return r
        return None

    def clock_in(self, employee_id: int, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        now = self._now(now)
        today = now.date()

        existing = self.get_today_record(employee_id, today)
        if existing and existing.clock_in_time:
            raise ValidationError("You have already clocked in today")

        self._attendance.clock_in(employee_id=int(employee_id), work_date=today.isoformat(), time=now.strftime("%H:%M"))
        return self.get_today_record(employee_id, today)

    def clock_out(self, employee_id: int, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        now = self._now(now)
        today = now.date()

        record = self.get_today_record(employee_id, today)
        if not record or not record.clock_in_time:
            raise ValidationError("You have not clocked in today")
        if record.clock_out_time:
            raise ValidationError("You have already clocked out today")

        self._attendance.clock_out(employee_id=int(employee_id), work_date=today.isoformat(), time=now.strftime("%H:%M"))
        return self.get_today_record(employee_id, today)

    def undo(self, employee_id: int, action: str, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        """Revert today's last clock action.

        Undoing a clock-in removes the record; undoing a clock-out only
        clears the clock-out time.
        """

        try:
            action = UndoAction(action)
        except ValueError:
            raise ValidationError("Unknown action to undo")

        today = self._now(now).date()
        record = self.get_today_record(employee_id, today)
        if not record:
            raise ValidationError("There is nothing to undo today")

        if action == UndoAction.CLOCK_IN:
            self._attendance.delete(record.attendance_id)
        else:
            if not record.clock_out_time:
                raise ValidationError("You have not clocked out today")
            self._attendance.update(
                record.attendance_id,
                {"clock_out_time": None, "status": AttendanceStatus.CLOCKED_IN.value},
            )
        return self.get_today_record(employee_id, today)

    def create_record(
        self,
        *,
        employee_id: Any,
        work_date: str,
        clock_in_time: Optional[str] = None,
        clock_out_time: Optional[str] = None,
        status: Optional[str] = None,
    ) -> AttendanceRecord:
        employee_id = require_int(employee_id, "Employee", minimum=1)
        work_date = require_date(work_date, "Date")
        clock_in = parse_hhmm(clock_in_time, "Clock-in time")
        clock_out = parse_hhmm(clock_out_time, "Clock-out time")
        if clock_out and not clock_in:
            raise ValidationError("Clock-in time is required when clock-out time is set")

        return self._attendance.create(
            employee_id=employee_id,
            work_date=work_date,
            clock_in_time=str(clock_in) if clock_in else None,
            clock_out_time=str(clock_out) if clock_out else None,
            status=status or (AttendanceStatus.PRESENT.value if clock_in else AttendanceStatus.ABSENT.value),
        )

    def update_record(
        self,
        attendance_id: int,
        *,
        clock_in_time: Optional[str] = None,
        clock_out_time: Optional[str] = None,
        status: Optional[str] = None,
    ) -> None:
        changes: dict[str, Any] = {}
        clock_in = parse_hhmm(clock_in_time, "Clock-in time")
        clock_out = parse_hhmm(clock_out_time, "Clock-out time")
        if clock_in:
            changes["clock_in_time"] = str(clock_in)
        if clock_out:
            changes["clock_out_time"] = str(clock_out)
        if status:
            changes["status"] = status
        if not changes:
            raise ValidationError("Nothing to update")
        self._attendance.update(int(attendance_id), changes)

    def delete_record(self, attendance_id: int) -> None:
        self._attendance.delete(int(attendance_id))

    def get_history_ui(self, employee_id: int, *, limit: Optional[int] = None) -> list[dict]:
        rows = self.list_records(employee_id=int(employee_id))
        if limit is not None:
            rows = rows[:limit]
        return [self.to_ui(r) for r in rows]

    def to_ui(self, r: AttendanceRecord) -> dict:
        clock_in = format_time_of_day(r.clock_in_time, offset=self._offset)
        clock_out = format_time_of_day(r.clock_out_time, offset=self._offset)
        duration = compute_duration(clock_in, clock_out) if clock_in and clock_out else None
        return {
            "id": r.attendance_id,
            "employee_id": r.employee_id,
            "employee_name": r.employee_name or "",
            "date": to_date_key(r.work_date, offset=self._offset) or "",
            "clock_in": clock_in or "-",
            "clock_out": clock_out or "-",
            "worked_hours": str(duration) if duration else "0:00",
            "status": r.status,
        }
