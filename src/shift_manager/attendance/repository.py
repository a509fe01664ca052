from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def clock_in(self, *, employee_id: int, work_date: str, time: str) -> None:
        raise NotImplementedError

    def clock_out(self, *, employee_id: int, work_date: str, time: str) -> None:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: str,
        clock_in_time: Optional[str],
        clock_out_time: Optional[str],
        status: Optional[str] = None,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, attendance_id: int, changes: dict[str, Any]) -> None:
        """Owner override / undo; ``None`` values clear the field."""

        raise NotImplementedError

    def delete(self, attendance_id: int) -> None:
        raise NotImplementedError
