from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, hourly_wage: int) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: int, *, name: str, hourly_wage: int) -> Employee:
        raise NotImplementedError

    def delete(self, employee_id: int) -> None:
        raise NotImplementedError
