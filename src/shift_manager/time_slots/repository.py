from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import CoverageSummary, TimeSlot


class TimeSlotRepository(Protocol):
    def list(self, *, day_of_week: Optional[int] = None) -> Sequence[TimeSlot]:
        raise NotImplementedError

    def create(
        self,
        *,
        day_of_week: int,
        start_time: str,
        end_time: str,
        position: str,
        required_count: int,
    ) -> TimeSlot:
        raise NotImplementedError

    def update(self, slot_id: int, changes: dict[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, slot_id: int) -> None:
        raise NotImplementedError

    def coverage(self, *, work_date: str) -> Sequence[CoverageSummary]:
        raise NotImplementedError
