from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..core.enums import ShiftRequestStatus
from ..core.exceptions import ApiError
from .model import ShiftRequest
from .repository import ShiftRequestRepository


def _to_request(r: dict) -> ShiftRequest:
    try:
        status = ShiftRequestStatus(r.get("status") or ShiftRequestStatus.PENDING.value)
    except ValueError:
        status = ShiftRequestStatus.PENDING
    return ShiftRequest(
        request_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        work_date=r.get("date") or "",
        preferred_start_time=r.get("preferred_start_time") or "",
        preferred_end_time=r.get("preferred_end_time") or "",
        status=status,
        employee_name=r.get("employee_name"),
    )


class ApiShiftRequestRepository(ShiftRequestRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list(
        self,
        *,
        employee_id: Optional[int] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> Sequence[ShiftRequest]:
        params = {
            "employee_id": employee_id,
            "year": year,
            "month": f"{int(month):02d}" if month else None,
        }
        rows = self._client.get("/shift-requests", params=params, fallback="Could not load shift requests") or []
        return [_to_request(r) for r in rows]

    def get_by_id(self, request_id: int) -> Optional[ShiftRequest]:
        try:
            r = self._client.get(f"/shift-requests/{int(request_id)}", fallback="Could not load the shift request")
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        return _to_request(r) if r else None

    def create(
        self,
        *,
        employee_id: int,
        work_date: str,
        preferred_start_time: str,
        preferred_end_time: str,
    ) -> ShiftRequest:
        r = self._client.post(
            "/shift-requests",
            json={
                "employee_id": int(employee_id),
                "date": work_date,
                "preferred_start_time": preferred_start_time,
                "preferred_end_time": preferred_end_time,
            },
            fallback="Could not submit the shift request",
        )
        return _to_request(r)

    def update_status(self, request_id: int, *, status: ShiftRequestStatus) -> None:
        self._client.put(
            f"/shift-requests/{int(request_id)}",
            json={"status": status.value},
            fallback="Could not update the shift request",
        )

    def delete(self, request_id: int) -> None:
        self._client.delete(f"/shift-requests/{int(request_id)}", fallback="Could not delete the shift request")
