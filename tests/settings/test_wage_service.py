import pytest

from shift_manager.core.exceptions import ValidationError
from shift_manager.wages.model import HourlyWage
from shift_manager.wages.service import HourlyWageService


class FakeWageRepo:
    def __init__(self, rows=()):
        self.rows = list(rows)
        self.deleted = []
        self.updated = []

    def list(self, *, employee_id=None):
        return [w for w in self.rows if employee_id is None or w.employee_id == employee_id]

    def history(self, employee_id):
        return self.list(employee_id=employee_id)

    def current(self, employee_id):
        rows = self.list(employee_id=employee_id)
        return max(rows, key=lambda w: w.effective_date) if rows else None

    def create(self, *, employee_id, hourly_wage, effective_date):
        wage = HourlyWage(len(self.rows) + 100, employee_id, hourly_wage, effective_date)
        self.rows.append(wage)
        return wage

    def update(self, wage_id, *, hourly_wage, effective_date):
        self.updated.append((wage_id, hourly_wage, effective_date))
        self.rows = [
            HourlyWage(w.wage_id, w.employee_id, hourly_wage, effective_date) if w.wage_id == wage_id else w
            for w in self.rows
        ]

    def delete(self, wage_id):
        self.deleted.append(wage_id)
        self.rows = [w for w in self.rows if w.wage_id != wage_id]


def test_set_wage_updates_entry_for_same_effective_date_in_place():
    repo = FakeWageRepo(
        [
            HourlyWage(1, 7, 1000, "2025-01-01T00:00:00"),
            HourlyWage(2, 7, 1100, "2025-04-01T00:00:00"),
            HourlyWage(3, 8, 1100, "2025-04-01T00:00:00"),
        ]
    )
    wage = HourlyWageService(repo).set_wage(employee_id=7, hourly_wage="1200", effective_date="2025-04-01")

    assert repo.updated == [(2, 1200, "2025-04-01")]
    assert repo.deleted == []
    assert wage.wage_id == 2
    assert wage.hourly_wage == 1200
    assert sorted(w.wage_id for w in repo.rows) == [1, 2, 3]


def test_set_wage_creates_entry_for_new_effective_date():
    repo = FakeWageRepo([HourlyWage(1, 7, 1000, "2025-01-01")])
    wage = HourlyWageService(repo).set_wage(employee_id=7, hourly_wage=1200, effective_date="2025-04-01")

    assert repo.updated == []
    assert wage.effective_date == "2025-04-01"
    assert sorted(w.wage_id for w in repo.rows) == [1, wage.wage_id]


def test_set_wage_validation():
    svc = HourlyWageService(FakeWageRepo())
    with pytest.raises(ValidationError):
        svc.set_wage(employee_id=7, hourly_wage=0, effective_date="2025-04-01")
    with pytest.raises(ValidationError):
        svc.set_wage(employee_id=7, hourly_wage=1000, effective_date="")
