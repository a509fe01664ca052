from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from .model import Shift
from .repository import ShiftRepository


def _to_shift(r: dict) -> Shift:
    return Shift(
        shift_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        work_date=r.get("date") or "",
        start_time=r.get("start_time") or "",
        end_time=r.get("end_time") or "",
        break_minutes=int(r.get("break_time") or 0),
        employee_name=r.get("employee_name"),
    )


class ApiShiftRepository(ShiftRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list(self, *, employee_id: Optional[int] = None) -> Sequence[Shift]:
        rows = self._client.get("/shifts", params={"employee_id": employee_id}, fallback="Could not load shifts") or []
        return [_to_shift(r) for r in rows]

    def list_month(self, *, year: int, month: int, employee_id: Optional[int] = None) -> Sequence[Shift]:
        rows = self._client.get(
            "/shifts/month",
            params={"year": int(year), "month": f"{int(month):02d}", "employee_id": employee_id},
            fallback="Could not load shifts for the month",
        ) or []
        return [_to_shift(r) for r in rows]

    def create(
        self,
        *,
        employee_id: int,
        work_date: str,
        start_time: str,
        end_time: str,
        break_minutes: int = 0,
    ) -> Shift:
        r = self._client.post(
            "/shifts",
            json={
                "employee_id": int(employee_id),
                "date": work_date,
                "start_time": start_time,
                "end_time": end_time,
                "break_time": int(break_minutes),
            },
            fallback="Could not add the shift",
        )
        return _to_shift(r)

    def update(self, shift_id: int, changes: dict[str, Any]) -> None:
        self._client.put(f"/shifts/{int(shift_id)}", json=changes, fallback="Could not update the shift")

    def delete(self, shift_id: int) -> None:
        self._client.delete(f"/shifts/{int(shift_id)}", fallback="Could not delete the shift")
