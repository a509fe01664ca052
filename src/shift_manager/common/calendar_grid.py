from __future__ import annotations

import calendar
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Iterable, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import DEFAULT_UTC_OFFSET, to_date_key


@dataclass(frozen=True)
class CalendarCell:
    date: date
    in_current_month: bool
    day_of_week: int  # 0 = Sunday

    @property
    def key(self) -> str:
        return self.date.isoformat()


def sunday_weekday(d: date) -> int:
    """Weekday number with Sunday = 0 ... Saturday = 6."""
    return (d.weekday() + 1) % 7


def validate_year_month(year: int, month: int) -> tuple[int, int]:
    try:
        year, month = int(year), int(month)
    except (TypeError, ValueError):
        raise ValidationError("Year and month must be numbers")
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12")
    if not 1 <= year <= 9999:
        raise ValidationError("Year is out of range")
    return year, month


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of the month."""

    year, month = validate_year_month(year, month)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def build_month(year: int, month: int) -> list[CalendarCell]:
    """Full weeks covering the month, Sunday through Saturday."""

    first, last = month_bounds(year, month)
    start = first - timedelta(days=sunday_weekday(first))
    end = last + timedelta(days=6 - sunday_weekday(last))

    cells: list[CalendarCell] = []
    current = start
    while current <= end:
        cells.append(
            CalendarCell(
                date=current,
                in_current_month=current.month == first.month,
                day_of_week=sunday_weekday(current),
            )
        )
        current += timedelta(days=1)
    return cells


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def bucket_by_date(
    records: Iterable[Any],
    date_field: str,
    *,
    offset: timedelta = DEFAULT_UTC_OFFSET,
) -> dict[str, list[Any]]:
    """Group records (dicts or objects) by their display-local YYYY-MM-DD date.

    Records without a usable date are left out.
    """

    buckets: dict[str, list[Any]] = {}
    for record in records:
        key: Optional[str] = to_date_key(_field(record, date_field), offset=offset)
        if key is None:
            continue
        buckets.setdefault(key, []).append(record)
    return buckets


def filter_month(
    records: Iterable[Any],
    date_field: str,
    year: int,
    month: int,
    *,
    offset: timedelta = DEFAULT_UTC_OFFSET,
) -> list[Any]:
    """Keep only the records whose display-local date falls in the given month."""

    prefix = f"{int(year):04d}-{int(month):02d}-"
    return [
        record
        for record in records
        if (to_date_key(_field(record, date_field), offset=offset) or "").startswith(prefix)
    ]
