import pytest

from shift_manager.core.exceptions import ValidationError
from shift_manager.employees.model import Employee
from shift_manager.employees.service import EmployeeService


class FakeEmployeeRepo:
    def __init__(self):
        self.items = {}

    def list_all(self):
        return list(self.items.values())

    def get_by_id(self, employee_id):
        return self.items.get(employee_id)

    def create(self, *, name, hourly_wage):
        emp = Employee(len(self.items) + 1, name, hourly_wage)
        self.items[emp.employee_id] = emp
        return emp

    def update(self, employee_id, *, name, hourly_wage):
        self.items[employee_id] = Employee(employee_id, name, hourly_wage)
        return self.items[employee_id]

    def delete(self, employee_id):
        self.items.pop(employee_id, None)


def test_register_trims_name_and_parses_wage():
    svc = EmployeeService(FakeEmployeeRepo())
    emp = svc.register(name="  Aki  ", hourly_wage="1100")
    assert emp.name == "Aki"
    assert emp.hourly_wage == 1100


@pytest.mark.parametrize("name,wage", [("", 1000), ("Aki", 0), ("Aki", "abc")])
def test_register_validation(name, wage):
    with pytest.raises(ValidationError):
        EmployeeService(FakeEmployeeRepo()).register(name=name, hourly_wage=wage)


def test_unknown_employee():
    with pytest.raises(ValidationError):
        EmployeeService(FakeEmployeeRepo()).get_employee(42)
