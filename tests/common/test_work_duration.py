from shift_manager.common.work_duration import (
    DurationResult,
    compute_duration,
    format_decimal_hours,
    format_duration,
)


def test_same_day_duration():
    result = compute_duration("09:00", "17:30")
    assert result == DurationResult(hours=8, minutes=30)
    assert str(result) == "8:30"


def test_overnight_shift_moves_end_to_next_day():
    assert compute_duration("22:00", "06:00") == DurationResult(hours=8, minutes=0)


def test_equal_times_give_zero():
    assert compute_duration("09:00", "09:00").total_minutes == 0


def test_missing_side_gives_zero():
    assert str(compute_duration(None, "17:00")) == "0:00"
    assert str(compute_duration("09:00", "bad")) == "0:00"


def test_utc_instants_are_normalized_first():
    # 09:00 -> 17:30 local
    assert format_duration("2025-01-15T00:00:00Z", "2025-01-15T08:30:00Z") == "8:30"


def test_negative_minutes_clamp_to_zero():
    assert DurationResult.from_minutes(-5) == DurationResult(0, 0)


def test_decimal_hours_rendering():
    assert format_decimal_hours(7.5) == "07:30"
    assert format_decimal_hours(8.25) == "08:15"
    assert format_decimal_hours(0) == "00:00"
