from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ShiftRequestStatus
from .model import ShiftRequest


class ShiftRequestRepository(Protocol):
    def list(
        self,
        *,
        employee_id: Optional[int] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> Sequence[ShiftRequest]:
        raise NotImplementedError

    def get_by_id(self, request_id: int) -> Optional[ShiftRequest]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: str,
        preferred_start_time: str,
        preferred_end_time: str,
    ) -> ShiftRequest:
        raise NotImplementedError

    def update_status(self, request_id: int, *, status: ShiftRequestStatus) -> None:
        raise NotImplementedError

    def delete(self, request_id: int) -> None:
        raise NotImplementedError
