from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import HourlyWage


class HourlyWageRepository(Protocol):
    def list(self, *, employee_id: Optional[int] = None) -> Sequence[HourlyWage]:
        raise NotImplementedError

    def history(self, employee_id: int) -> Sequence[HourlyWage]:
        raise NotImplementedError

    def current(self, employee_id: int) -> Optional[HourlyWage]:
        raise NotImplementedError

    def create(self, *, employee_id: int, hourly_wage: int, effective_date: str) -> HourlyWage:
        raise NotImplementedError

    def update(self, wage_id: int, *, hourly_wage: int, effective_date: str) -> None:
        raise NotImplementedError

    def delete(self, wage_id: int) -> None:
        raise NotImplementedError
