from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any

from .datetime_utils import DEFAULT_UTC_OFFSET, extract_time_of_day

# Any fixed day works; only the difference between the two anchors matters.
REFERENCE_DATE = date(2000, 1, 1)


@dataclass(frozen=True)
class DurationResult:
    hours: int = 0
    minutes: int = 0

    @classmethod
    def from_minutes(cls, total_minutes: int) -> "DurationResult":
        total_minutes = max(int(total_minutes), 0)
        return cls(hours=total_minutes // 60, minutes=total_minutes % 60)

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    @property
    def decimal_hours(self) -> Decimal:
        return Decimal(self.total_minutes) / 60

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes:02d}"


def compute_duration(start: Any, end: Any, *, offset: timedelta = DEFAULT_UTC_OFFSET) -> DurationResult:
    """Elapsed time between two clock values.

    When ``end`` is earlier than ``start`` the shift crossed midnight and the
    end is moved to the next day. Missing input gives 0:00.
    """

    start_t = extract_time_of_day(start, offset=offset)
    end_t = extract_time_of_day(end, offset=offset)
    if start_t is None or end_t is None:
        return DurationResult()

    start_dt = datetime.combine(REFERENCE_DATE, start_t.to_time())
    end_dt = datetime.combine(REFERENCE_DATE, end_t.to_time())
    if end_dt < start_dt:
        end_dt += timedelta(days=1)

    minutes = int((end_dt - start_dt).total_seconds() // 60)
    return DurationResult.from_minutes(minutes)


def format_duration(start: Any, end: Any, **kwargs) -> str:
    """H:MM rendering of compute_duration."""
    return str(compute_duration(start, end, **kwargs))


def format_decimal_hours(hours: Any) -> str:
    """Render decimal hours (e.g. 7.5) as HH:MM."""

    total_minutes = int((Decimal(str(hours)) * 60).to_integral_value())
    total_minutes = max(total_minutes, 0)
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"
