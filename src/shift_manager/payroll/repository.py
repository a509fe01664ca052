from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollSummary


class PayrollRepository(Protocol):
    def calculate(self, *, year: int, month: int, employee_id: Optional[int] = None) -> Sequence[PayrollSummary]:
        raise NotImplementedError

    def for_employee(self, employee_id: int, *, year: int, month: int) -> Optional[PayrollSummary]:
        raise NotImplementedError
