from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    actual_hours = r.get("actual_hours")
    return AttendanceRecord(
        attendance_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        work_date=r.get("date") or "",
        clock_in_time=r.get("clock_in_time") or None,
        clock_out_time=r.get("clock_out_time") or None,
        status=r.get("status") or "",
        actual_hours=float(actual_hours) if actual_hours is not None else None,
        employee_name=r.get("employee_name"),
    )


class ApiAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        rows = self._client.get(
            "/attendance",
            params={"employee_id": employee_id, "start_date": start_date, "end_date": end_date},
            fallback="Could not load attendance records",
        ) or []
        return [_to_record(r) for r in rows]

    def clock_in(self, *, employee_id: int, work_date: str, time: str) -> None:
        self._client.post(
            "/attendance/clock-in",
            json={"employee_id": int(employee_id), "date": work_date, "time": time},
            fallback="Could not record clock-in",
        )

    def clock_out(self, *, employee_id: int, work_date: str, time: str) -> None:
        self._client.post(
            "/attendance/clock-out",
            json={"employee_id": int(employee_id), "date": work_date, "time": time},
            fallback="Could not record clock-out",
        )

    def create(
        self,
        *,
        employee_id: int,
        work_date: str,
        clock_in_time: Optional[str],
        clock_out_time: Optional[str],
        status: Optional[str] = None,
    ) -> AttendanceRecord:
        r = self._client.post(
            "/attendance",
            json={
                "employee_id": int(employee_id),
                "date": work_date,
                "clock_in_time": clock_in_time,
                "clock_out_time": clock_out_time,
                "status": status or "",
            },
            fallback="Could not add the attendance record",
        )
        return _to_record(r)

    def update(self, attendance_id: int, changes: dict[str, Any]) -> None:
        self._client.put(
            f"/attendance/{int(attendance_id)}",
            json=changes,
            fallback="Could not update the attendance record",
        )

    def delete(self, attendance_id: int) -> None:
        self._client.delete(f"/attendance/{int(attendance_id)}", fallback="Could not delete the attendance record")
