from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Optional

from ..core.constants import DEFAULT_UTC_OFFSET_HOURS
from ..core.enums import TimeKind
from ..core.exceptions import ValidationError

DEFAULT_UTC_OFFSET = timedelta(hours=DEFAULT_UTC_OFFSET_HOURS)

_MINUTES_PER_DAY = 24 * 60

# 2025-01-15T07:30:00Z, 2025-01-15T07:30:00.123Z, 2025-01-15T07:30:00+00:00
_UTC_INSTANT = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.\d+)?(?:Z|\+00:00)$"
)
# 2025-01-15T16:30 or 2025-01-15 16:30:00 (no zone marker)
_LOCAL_TIMESTAMP = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[T ](?P<hour>\d{2}):(?P<minute>\d{2})(?::\d{2}(?:\.\d+)?)?$"
)
# 16:30 or 16:30:00
_WALL_CLOCK = re.compile(r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::\d{2})?$")
_DATE_PREFIX = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time truncated to minutes."""

    hour: int
    minute: int

    def __post_init__(self):
        if not 0 <= self.hour <= 23 or not 0 <= self.minute <= 59:
            raise ValueError(f"Invalid time of day: {self.hour}:{self.minute}")

    @classmethod
    def from_minutes(cls, minutes: int) -> "TimeOfDay":
        minutes = int(minutes) % _MINUTES_PER_DAY
        return cls(hour=minutes // 60, minute=minutes % 60)

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def to_time(self) -> time:
        return time(hour=self.hour, minute=self.minute)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: Optional[str], field_name: str = "Time") -> Optional[TimeOfDay]:
    """Parse user input in HH:MM form. Empty input gives None."""

    v = (value or "").strip()
    if not v:
        return None
    try:
        t = datetime.strptime(v, "%H:%M").time()
    except ValueError:
        raise ValidationError(f"{field_name} must be HH:MM")
    return TimeOfDay(hour=t.hour, minute=t.minute)


def now_local(offset: timedelta = DEFAULT_UTC_OFFSET) -> datetime:
    """Current wall-clock time in the display timezone (naive).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return (datetime.now(timezone.utc) + offset).replace(tzinfo=None)


def detect_time_kind(value: str) -> Optional[TimeKind]:
    """Guess the kind of a raw time string from its shape."""

    if _UTC_INSTANT.match(value):
        return TimeKind.UTC_INSTANT
    if _LOCAL_TIMESTAMP.match(value) or _WALL_CLOCK.match(value):
        return TimeKind.LOCAL_WALL_CLOCK
    return None


def parse_utc_instant(value: str) -> Optional[datetime]:
    """Parse a UTC ISO-8601 timestamp into an aware datetime, or None."""

    m = _UTC_INSTANT.match((value or "").strip())
    if not m:
        return None
    try:
        naive = datetime.strptime(
            f"{m['date']}T{m['hour']}:{m['minute']}:{m['second']}", "%Y-%m-%dT%H:%M:%S"
        )
    except ValueError:
        return None
    return naive.replace(tzinfo=timezone.utc)


def _clock_fields(value: str) -> Optional[tuple[int, int]]:
    for pattern in (_WALL_CLOCK, _LOCAL_TIMESTAMP, _UTC_INSTANT):
        m = pattern.match(value)
        if m:
            return int(m["hour"]), int(m["minute"])
    return None


def extract_time_of_day(
    raw: Any,
    *,
    kind: Optional[TimeKind] = None,
    offset: timedelta = DEFAULT_UTC_OFFSET,
) -> Optional[TimeOfDay]:
    """Normalize a backend time field into a display TimeOfDay.

    UTC instants get the display offset applied; bare HH:MM[:SS] strings and
    timestamps without a zone marker are already local and are taken as
    written. ``kind`` skips the shape sniffing when the caller knows better.
    Returns None for empty or unparseable input.
    """

    if raw is None:
        return None
    if isinstance(raw, TimeOfDay):
        return raw
    if isinstance(raw, datetime):
        if raw.tzinfo is not None:
            raw = raw.astimezone(timezone.utc).replace(tzinfo=None) + offset
        return TimeOfDay(hour=raw.hour, minute=raw.minute)
    if isinstance(raw, time):
        return TimeOfDay(hour=raw.hour, minute=raw.minute)

    value = str(raw).strip()
    if not value:
        return None

    kind = kind or detect_time_kind(value)
    if kind is None:
        return None

    fields = _clock_fields(value)
    if fields is None:
        return None
    hour, minute = fields
    if hour > 23 or minute > 59:
        return None

    minutes = hour * 60 + minute
    if kind is TimeKind.UTC_INSTANT:
        # Only the clock part matters; zero-dates like 0000-01-01 are fine here.
        minutes += int(offset.total_seconds() // 60)
    return TimeOfDay.from_minutes(minutes)


def format_time_of_day(raw: Any, **kwargs) -> str:
    """Same as extract_time_of_day but renders HH:MM, or "" when missing."""

    t = extract_time_of_day(raw, **kwargs)
    return str(t) if t else ""


def to_date_key(value: Any, *, offset: timedelta = DEFAULT_UTC_OFFSET) -> Optional[str]:
    """Normalize a date-ish value into a YYYY-MM-DD key in display-local time.

    UTC instants are shifted into the display timezone before the date is
    taken, so 2025-01-14T15:00:00Z is the 15th at +9h.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None) + offset
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = str(value).strip()
    if not text:
        return None

    instant = parse_utc_instant(text)
    if instant is not None:
        return (instant.replace(tzinfo=None) + offset).date().isoformat()

    m = _DATE_PREFIX.match(text)
    if not m:
        return None
    try:
        return parse_iso_date(m["date"]).isoformat()
    except ValueError:
        return None
