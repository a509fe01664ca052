from __future__ import annotations

from dataclasses import replace
from datetime import timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import DEFAULT_UTC_OFFSET, to_date_key
from ..common.validators import require_date, require_int
from .model import HourlyWage
from .repository import HourlyWageRepository


class HourlyWageService:
    """Use case: hourly wage settings per employee (owner)."""

    def __init__(self, wages: HourlyWageRepository, *, offset: timedelta = DEFAULT_UTC_OFFSET):
        self._wages = wages
        self._offset = offset

    def list_wages(self, *, employee_id: Optional[int] = None) -> Sequence[HourlyWage]:
        return self._wages.list(employee_id=employee_id)

    def history(self, employee_id: int) -> Sequence[HourlyWage]:
        return self._wages.history(require_int(employee_id, "Employee", minimum=1))

    def current(self, employee_id: int) -> Optional[HourlyWage]:
        return self._wages.current(int(employee_id))

    def set_wage(self, *, employee_id, hourly_wage, effective_date: str) -> HourlyWage:
        """Set the wage from an effective date.

        An existing entry for the same date is updated in place; otherwise a
        new entry is created.
        """

        employee_id = require_int(employee_id, "Employee", minimum=1)
        wage = require_int(hourly_wage, "Hourly wage", minimum=1)
        effective_date = require_date(effective_date, "Effective date")

        for existing in self._wages.list(employee_id=employee_id):
            if existing.employee_id != employee_id:
                continue
            if to_date_key(existing.effective_date, offset=self._offset) == effective_date:
                self._wages.update(existing.wage_id, hourly_wage=wage, effective_date=effective_date)
                return replace(existing, hourly_wage=wage, effective_date=effective_date)

        return self._wages.create(employee_id=employee_id, hourly_wage=wage, effective_date=effective_date)

    def delete(self, wage_id: int) -> None:
        self._wages.delete(int(wage_id))
