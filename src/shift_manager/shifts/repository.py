from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list(self, *, employee_id: Optional[int] = None) -> Sequence[Shift]:
        raise NotImplementedError

    def list_month(self, *, year: int, month: int, employee_id: Optional[int] = None) -> Sequence[Shift]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: str,
        start_time: str,
        end_time: str,
        break_minutes: int = 0,
    ) -> Shift:
        raise NotImplementedError

    def update(self, shift_id: int, changes: dict[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, shift_id: int) -> None:
        raise NotImplementedError
