from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..model import MonthlyPayrollLine, PayrollLine, WorkInterval


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def worked_minutes(self, interval: WorkInterval) -> int:
        """Gross minutes of one interval, before breaks."""

        raise NotImplementedError

    @abstractmethod
    def aggregate(
        self,
        intervals: Iterable[WorkInterval],
        hourly_wage: int,
        *,
        employee_id: Optional[int] = None,
    ) -> PayrollLine:
        raise NotImplementedError

    @abstractmethod
    def aggregate_monthly(
        self,
        intervals: Iterable[WorkInterval],
        hourly_wage: int,
        *,
        employee_id: Optional[int] = None,
    ) -> MonthlyPayrollLine:
        raise NotImplementedError
