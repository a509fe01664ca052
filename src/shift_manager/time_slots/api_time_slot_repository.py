from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from .model import CoverageSummary, TimeSlot
from .repository import TimeSlotRepository


def _to_slot(r: dict) -> TimeSlot:
    return TimeSlot(
        slot_id=int(r["id"]),
        day_of_week=int(r.get("day_of_week") or 0),
        start_time=r.get("start_time") or "",
        end_time=r.get("end_time") or "",
        position=r.get("position") or "",
        required_count=int(r.get("required_count") or 0),
    )


class ApiTimeSlotRepository(TimeSlotRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list(self, *, day_of_week: Optional[int] = None) -> Sequence[TimeSlot]:
        rows = self._client.get(
            "/time-slots",
            params={"day_of_week": day_of_week},
            fallback="Could not load time slots",
        ) or []
        return [_to_slot(r) for r in rows]

    def create(
        self,
        *,
        day_of_week: int,
        start_time: str,
        end_time: str,
        position: str,
        required_count: int,
    ) -> TimeSlot:
        r = self._client.post(
            "/time-slots",
            json={
                "day_of_week": int(day_of_week),
                "start_time": start_time,
                "end_time": end_time,
                "position": position,
                "required_count": int(required_count),
            },
            fallback="Could not add the time slot",
        )
        return _to_slot(r)

    def update(self, slot_id: int, changes: dict[str, Any]) -> None:
        self._client.put(f"/time-slots/{int(slot_id)}", json=changes, fallback="Could not update the time slot")

    def delete(self, slot_id: int) -> None:
        self._client.delete(f"/time-slots/{int(slot_id)}", fallback="Could not delete the time slot")

    def coverage(self, *, work_date: str) -> Sequence[CoverageSummary]:
        rows = self._client.get(
            "/time-slots/coverage",
            params={"date": work_date},
            fallback="Could not load the coverage summary",
        ) or []
        return [
            CoverageSummary(
                date=r.get("date") or work_date,
                day_of_week=int(r.get("day_of_week") or 0),
                start_time=r.get("start_time") or "",
                end_time=r.get("end_time") or "",
                position=r.get("position") or "",
                required_count=int(r.get("required_count") or 0),
                actual_count=int(r.get("actual_count") or 0),
            )
            for r in rows
        ]
