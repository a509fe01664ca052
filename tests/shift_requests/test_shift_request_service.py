from dataclasses import replace

import pytest

from shift_manager.core.enums import ShiftRequestStatus
from shift_manager.core.exceptions import AuthorizationError, ValidationError
from shift_manager.shift_requests.model import ShiftRequest
from shift_manager.shift_requests.service import ShiftRequestService, pending_count


class FakeShiftRequestRepo:
    def __init__(self):
        self._next_id = 1
        self.items: dict[int, ShiftRequest] = {}

    def list(self, *, employee_id=None, year=None, month=None):
        return [r for r in self.items.values() if employee_id is None or r.employee_id == employee_id]

    def get_by_id(self, request_id):
        return self.items.get(int(request_id))

    def create(self, *, employee_id, work_date, preferred_start_time, preferred_end_time):
        rid = self._next_id
        self._next_id += 1
        self.items[rid] = ShiftRequest(
            request_id=rid,
            employee_id=employee_id,
            work_date=work_date,
            preferred_start_time=preferred_start_time,
            preferred_end_time=preferred_end_time,
            status=ShiftRequestStatus.PENDING,
        )
        return self.items[rid]

    def update_status(self, request_id, *, status):
        self.items[request_id] = replace(self.items[request_id], status=status)

    def delete(self, request_id):
        del self.items[request_id]


def _submit(svc, employee_id=2, work_date="2025-04-01"):
    return svc.submit(employee_id=employee_id, work_date=work_date, start_time="10:00", end_time="15:00")


def test_submit_and_list_own():
    repo = FakeShiftRequestRepo()
    svc = ShiftRequestService(repo)
    _submit(svc, work_date="2025-04-03")
    _submit(svc, work_date="2025-04-01")
    _submit(svc, employee_id=5)

    rows = svc.list_for_employee(2)
    assert [r.work_date for r in rows] == ["2025-04-01", "2025-04-03"]
    assert svc.to_view(rows[0])["status"] == "pending"


def test_submit_requires_date_and_times():
    svc = ShiftRequestService(FakeShiftRequestRepo())
    with pytest.raises(ValidationError):
        svc.submit(employee_id=2, work_date="", start_time="10:00", end_time="15:00")
    with pytest.raises(ValidationError):
        svc.submit(employee_id=2, work_date="2025-04-01", start_time="10:00", end_time="")


def test_only_pending_requests_can_be_decided():
    repo = FakeShiftRequestRepo()
    svc = ShiftRequestService(repo)
    req = _submit(svc)

    svc.approve(req.request_id)
    assert repo.items[req.request_id].status == ShiftRequestStatus.APPROVED

    with pytest.raises(ValidationError):
        svc.reject(req.request_id)
    with pytest.raises(ValidationError):
        svc.approve(999)


def test_employee_can_only_withdraw_own_request():
    repo = FakeShiftRequestRepo()
    svc = ShiftRequestService(repo)
    req = _submit(svc, employee_id=2)

    with pytest.raises(AuthorizationError):
        svc.withdraw(employee_id=5, request_id=req.request_id)

    svc.withdraw(employee_id=2, request_id=req.request_id)
    assert repo.items == {}


def test_pending_count():
    repo = FakeShiftRequestRepo()
    svc = ShiftRequestService(repo)
    a = _submit(svc, employee_id=2)
    _submit(svc, employee_id=2)
    _submit(svc, employee_id=5)
    svc.reject(a.request_id)

    rows = repo.list()
    assert pending_count(rows) == 2
    assert pending_count(rows, employee_id=2) == 1


class UnfilteredShiftRequestRepo(FakeShiftRequestRepo):
    """Answers like the backend: every request, whatever the filters."""

    def list(self, *, employee_id=None, year=None, month=None):
        return list(self.items.values())


def test_own_list_leaves_out_other_employees():
    svc = ShiftRequestService(UnfilteredShiftRequestRepo())
    _submit(svc, employee_id=7)
    _submit(svc, employee_id=8)

    assert [r.employee_id for r in svc.list_for_employee(7)] == [7]


def test_month_list_leaves_out_other_months():
    svc = ShiftRequestService(UnfilteredShiftRequestRepo())
    _submit(svc, employee_id=7, work_date="2025-03-31")
    _submit(svc, employee_id=8, work_date="2025-04-02")
    _submit(svc, employee_id=7, work_date="2025-04-10")

    assert [r.work_date for r in svc.list_month(2025, 4)] == ["2025-04-02", "2025-04-10"]
    assert [r.work_date for r in svc.list_month(2025, 4, employee_id=7)] == ["2025-04-10"]
