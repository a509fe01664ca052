from datetime import datetime, timedelta, timezone

import pytest

from shift_manager.common.datetime_utils import (
    TimeOfDay,
    detect_time_kind,
    extract_time_of_day,
    format_time_of_day,
    parse_hhmm,
    to_date_key,
)
from shift_manager.core.enums import TimeKind
from shift_manager.core.exceptions import ValidationError


def test_utc_instant_is_shifted_into_display_time():
    assert extract_time_of_day("2025-01-15T07:30:00Z") == TimeOfDay(16, 30)
    assert extract_time_of_day("2025-01-15T07:30:00.123Z") == TimeOfDay(16, 30)
    assert extract_time_of_day("2025-01-15T07:30:00+00:00") == TimeOfDay(16, 30)


def test_utc_instant_wraps_past_midnight():
    assert extract_time_of_day("2025-01-15T20:00:00Z") == TimeOfDay(5, 0)


def test_zero_date_instant_only_uses_the_clock_part():
    assert extract_time_of_day("0000-01-01T09:00:00Z") == TimeOfDay(18, 0)


def test_wall_clock_values_are_taken_as_written():
    assert extract_time_of_day("16:30") == TimeOfDay(16, 30)
    assert extract_time_of_day("16:30:45") == TimeOfDay(16, 30)
    assert extract_time_of_day("2025-01-15T16:30") == TimeOfDay(16, 30)
    assert extract_time_of_day("2025-01-15 16:30:00") == TimeOfDay(16, 30)


@pytest.mark.parametrize("raw", [None, "", "   ", "garbage", "25:00", "12:75"])
def test_unusable_input_gives_none(raw):
    assert extract_time_of_day(raw) is None


def test_explicit_kind_overrides_shape_detection():
    assert extract_time_of_day("16:30", kind=TimeKind.UTC_INSTANT) == TimeOfDay(1, 30)
    assert extract_time_of_day("2025-01-15T07:30:00Z", kind=TimeKind.LOCAL_WALL_CLOCK) == TimeOfDay(7, 30)


def test_custom_offset():
    assert extract_time_of_day("2025-01-15T07:30:00Z", offset=timedelta(0)) == TimeOfDay(7, 30)
    assert extract_time_of_day("2025-01-15T07:30:00Z", offset=timedelta(hours=-5)) == TimeOfDay(2, 30)


def test_datetime_inputs():
    aware = datetime(2025, 1, 15, 7, 30, tzinfo=timezone.utc)
    assert extract_time_of_day(aware) == TimeOfDay(16, 30)
    assert extract_time_of_day(datetime(2025, 1, 15, 7, 30)) == TimeOfDay(7, 30)


def test_detect_time_kind():
    assert detect_time_kind("2025-01-15T07:30:00Z") is TimeKind.UTC_INSTANT
    assert detect_time_kind("07:30") is TimeKind.LOCAL_WALL_CLOCK
    assert detect_time_kind("yesterday") is None


def test_format_time_of_day():
    assert format_time_of_day("2025-01-15T00:05:00Z") == "09:05"
    assert format_time_of_day(None) == ""


def test_parse_hhmm():
    assert parse_hhmm("08:15") == TimeOfDay(8, 15)
    assert parse_hhmm("") is None
    assert parse_hhmm(None) is None
    with pytest.raises(ValidationError):
        parse_hhmm("25:00", "Start time")


def test_date_key_follows_display_timezone():
    assert to_date_key("2025-01-14T15:00:00Z") == "2025-01-15"
    assert to_date_key("2025-01-14T14:59:00Z") == "2025-01-14"
    assert to_date_key("2025-01-14T23:00:00") == "2025-01-14"
    assert to_date_key("2025-01-14") == "2025-01-14"


def test_date_key_rejects_garbage():
    assert to_date_key("nope") is None
    assert to_date_key("") is None
    assert to_date_key(None) is None
