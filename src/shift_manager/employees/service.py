from __future__ import annotations

from typing import Sequence

from ..common.validators import require_int, require_non_empty
from ..core.exceptions import ValidationError
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: register and maintain employees (owner)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return sorted(self._employees.list_all(), key=lambda e: e.employee_id)

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise ValidationError("Employee not found")
        return employee

    def register(self, *, name: str, hourly_wage) -> Employee:
        name = require_non_empty(name, "Name")
        wage = require_int(hourly_wage, "Hourly wage", minimum=1)
        return self._employees.create(name=name, hourly_wage=wage)

    def update(self, employee_id: int, *, name: str, hourly_wage) -> Employee:
        name = require_non_empty(name, "Name")
        wage = require_int(hourly_wage, "Hourly wage", minimum=1)
        return self._employees.update(int(employee_id), name=name, hourly_wage=wage)

    def delete(self, employee_id: int) -> None:
        self._employees.delete(int(employee_id))
