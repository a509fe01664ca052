from datetime import date
from decimal import Decimal

import pytest

from shift_manager.core.exceptions import ValidationError
from shift_manager.payroll.calculator.standard_calculator import StandardPayrollCalculator
from shift_manager.payroll.model import WorkInterval


def test_break_is_subtracted_from_gross():
    calc = StandardPayrollCalculator()
    line = calc.aggregate([WorkInterval("09:00", "17:30", break_minutes=60)], 1000, employee_id=1)

    assert line.gross_hours == Decimal("8.5")
    assert line.net_hours == Decimal("7.5")
    assert line.break_minutes_total == 60
    assert line.total_salary == Decimal("7500")
    assert line.shift_count == 1


def test_overnight_interval():
    calc = StandardPayrollCalculator()
    assert calc.worked_minutes(WorkInterval("22:00", "06:00")) == 8 * 60


def test_empty_input_gives_zero_line():
    line = StandardPayrollCalculator().aggregate([], 1200)
    assert line.gross_hours == 0
    assert line.net_hours == 0
    assert line.total_salary == 0
    assert line.shift_count == 0


def test_net_hours_never_negative():
    line = StandardPayrollCalculator().aggregate([WorkInterval("09:00", "09:30", break_minutes=60)], 1000)
    assert line.net_hours == 0
    assert line.total_salary == 0


def test_salary_is_exact_until_displayed():
    # 20 minutes at 1000/h is 333.33...; rounding is the caller's business
    line = StandardPayrollCalculator().aggregate([WorkInterval("09:00", "09:20")], 1000)
    assert line.total_salary == Decimal(20) / 60 * 1000


def test_negative_break_rejected():
    with pytest.raises(ValidationError):
        WorkInterval("09:00", "17:00", break_minutes=-1)


def test_monthly_overtime_is_per_day():
    intervals = [
        WorkInterval("08:00", "17:00", work_date=date(2025, 1, 6)),  # 9h
        WorkInterval("09:00", "15:00", work_date=date(2025, 1, 7)),  # 6h
        WorkInterval("08:00", "18:00", work_date=date(2025, 1, 8)),  # 10h
    ]
    line = StandardPayrollCalculator().aggregate_monthly(intervals, 1000)

    assert line.overtime_hours == Decimal(3)
    assert line.work_days == 3
    assert line.net_hours == Decimal(25)


def test_split_shifts_on_one_day_add_up_before_overtime():
    day = date(2025, 1, 6)
    intervals = [
        WorkInterval("06:00", "11:00", work_date=day),
        WorkInterval("13:00", "18:00", work_date=day),
    ]
    line = StandardPayrollCalculator().aggregate_monthly(intervals, 1000)

    assert line.overtime_hours == Decimal(2)
    assert line.work_days == 1


def test_overtime_threshold_is_configurable():
    intervals = [WorkInterval("08:00", "17:00", work_date=date(2025, 1, 6))]
    line = StandardPayrollCalculator(overtime_daily_hours=6).aggregate_monthly(intervals, 1000)
    assert line.overtime_hours == Decimal(3)
