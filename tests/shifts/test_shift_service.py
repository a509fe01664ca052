import pytest

from shift_manager.core.enums import ShiftRequestStatus
from shift_manager.core.exceptions import ValidationError
from shift_manager.shift_requests.model import ShiftRequest
from shift_manager.shifts.model import Shift
from shift_manager.shifts.service import ShiftService


class FakeShiftRepo:
    def __init__(self, shifts=()):
        self.shifts = list(shifts)
        self.created = []
        self.updated = []

    def list(self, *, employee_id=None):
        return [s for s in self.shifts if employee_id is None or s.employee_id == employee_id]

    def list_month(self, *, year, month, employee_id=None):
        return self.list(employee_id=employee_id)

    def create(self, *, employee_id, work_date, start_time, end_time, break_minutes=0):
        self.created.append(
            {"employee_id": employee_id, "date": work_date, "start": start_time, "end": end_time, "break": break_minutes}
        )
        return Shift(len(self.created), employee_id, work_date, start_time, end_time, break_minutes)

    def update(self, shift_id, changes):
        self.updated.append((shift_id, changes))

    def delete(self, shift_id):
        pass


class FakeRequestRepo:
    def __init__(self, requests=()):
        self.requests = list(requests)

    def list(self, *, employee_id=None, year=None, month=None):
        return [r for r in self.requests if employee_id is None or r.employee_id == employee_id]


def test_create_sends_local_datetimes():
    repo = FakeShiftRepo()
    ShiftService(repo).create(employee_id=3, work_date="2025-02-10", start_time="09:00", end_time="17:00", break_minutes="45")

    assert repo.created == [
        {"employee_id": 3, "date": "2025-02-10", "start": "2025-02-10T09:00", "end": "2025-02-10T17:00", "break": 45}
    ]


def test_overnight_shift_ends_next_day():
    repo = FakeShiftRepo()
    ShiftService(repo).create(employee_id=3, work_date="2025-02-28", start_time="22:00", end_time="06:00")
    assert repo.created[0]["end"] == "2025-03-01T06:00"


def test_create_validation():
    svc = ShiftService(FakeShiftRepo())
    with pytest.raises(ValidationError):
        svc.create(employee_id=3, work_date="2025-02-10", start_time="", end_time="17:00")
    with pytest.raises(ValidationError):
        svc.create(employee_id=3, work_date="2025-02-10", start_time="09:00", end_time="17:00", break_minutes=-5)
    with pytest.raises(ValidationError):
        svc.create(employee_id=0, work_date="2025-02-10", start_time="09:00", end_time="17:00")


def test_update_times_need_date_and_both_ends():
    repo = FakeShiftRepo()
    svc = ShiftService(repo)
    with pytest.raises(ValidationError):
        svc.update(1, start_time="10:00")
    with pytest.raises(ValidationError):
        svc.update(1, start_time="10:00", end_time="18:00")

    svc.update(1, work_date="2025-02-10", start_time="10:00", end_time="18:00", break_minutes=30)
    assert repo.updated == [
        (1, {"date": "2025-02-10", "start_time": "2025-02-10T10:00", "end_time": "2025-02-10T18:00", "break_time": 30})
    ]


def test_view_normalizes_utc_times():
    shift = Shift(1, 3, "2025-02-10T00:00:00Z", "2025-02-10T00:00:00Z", "2025-02-10T09:00:00Z", break_minutes=60)
    view = ShiftService(FakeShiftRepo()).to_view(shift)

    assert view["date"] == "2025-02-10"
    assert view["start_time"] == "09:00"
    assert view["end_time"] == "18:00"
    assert view["duration"] == "9:00"
    assert view["net_duration"] == "8:00"


def test_month_calendar_buckets_shifts_and_requests():
    shifts = [
        Shift(1, 3, "2025-02-10", "13:00", "17:00"),
        Shift(2, 4, "2025-02-10", "09:00", "12:00"),
        Shift(3, 3, "2025-01-31", "09:00", "12:00"),
    ]
    requests = [ShiftRequest(9, 3, "2025-02-11", "10:00", "15:00", ShiftRequestStatus.PENDING)]
    calendar = ShiftService(FakeShiftRepo(shifts), FakeRequestRepo(requests)).month_calendar(2025, 2)

    cells = {c["date"]: c for c in calendar["cells"]}
    assert len(calendar["cells"]) == 35
    assert [s["id"] for s in cells["2025-02-10"]["shifts"]] == [2, 1]
    assert cells["2025-02-11"]["shift_requests"][0]["duration"] == "5:00"
    # leading days of the grid still show their shifts
    assert not cells["2025-01-31"]["in_current_month"]
    assert [s["id"] for s in cells["2025-01-31"]["shifts"]] == [3]


def test_month_calendar_filters_requests_by_employee():
    requests = [
        ShiftRequest(9, 3, "2025-02-11", "10:00", "15:00", ShiftRequestStatus.PENDING),
        ShiftRequest(10, 4, "2025-02-11", "10:00", "15:00", ShiftRequestStatus.PENDING),
    ]
    calendar = ShiftService(FakeShiftRepo(), FakeRequestRepo(requests)).month_calendar(2025, 2, employee_id=4)
    cells = {c["date"]: c for c in calendar["cells"]}
    assert [r["id"] for r in cells["2025-02-11"]["shift_requests"]] == [10]


class UnfilteredShiftRepo(FakeShiftRepo):
    """Answers like the backend: every employee, whatever the filters."""

    def list(self, *, employee_id=None):
        return list(self.shifts)

    def list_month(self, *, year, month, employee_id=None):
        return list(self.shifts)


def test_lists_keep_only_the_requested_employee():
    repo = UnfilteredShiftRepo(
        [
            Shift(1, 7, "2025-03-03", "09:00", "17:00"),
            Shift(2, 8, "2025-03-03", "09:00", "17:00"),
            Shift(3, 7, "2025-04-01", "09:00", "17:00"),
        ]
    )
    svc = ShiftService(repo)

    assert [s.shift_id for s in svc.list_shifts(employee_id=7)] == [1, 3]
    assert [s.shift_id for s in svc.list_shifts()] == [1, 2, 3]
    assert [s.shift_id for s in svc.list_month(2025, 3, employee_id=7)] == [1]
    assert [s.shift_id for s in svc.list_month(2025, 3)] == [1, 2]


def test_month_calendar_keeps_only_the_requested_employee():
    repo = UnfilteredShiftRepo(
        [
            Shift(1, 7, "2025-03-03", "09:00", "17:00"),
            Shift(2, 8, "2025-03-03", "09:00", "17:00"),
        ]
    )
    calendar = ShiftService(repo).month_calendar(2025, 3, employee_id=7)

    cells = {c["date"]: c for c in calendar["cells"]}
    assert [s["employee_id"] for s in cells["2025-03-03"]["shifts"]] == [7]
