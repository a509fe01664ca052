from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional, Sequence

from ..common.datetime_utils import DEFAULT_UTC_OFFSET, format_time_of_day, parse_hhmm
from ..common.validators import require_date, require_int, require_non_empty
from ..core.exceptions import ValidationError
from .model import TimeSlot
from .repository import TimeSlotRepository


class TimeSlotService:
    """Use case: per-weekday staffing requirements (owner)."""

    def __init__(self, slots: TimeSlotRepository, *, offset: timedelta = DEFAULT_UTC_OFFSET):
        self._slots = slots
        self._offset = offset

    def list_slots(self, *, day_of_week: Optional[int] = None) -> Sequence[TimeSlot]:
        if day_of_week is not None:
            day_of_week = require_int(day_of_week, "Day of week", minimum=0, maximum=6)
        rows = self._slots.list(day_of_week=day_of_week)
        return sorted(rows, key=lambda s: (s.day_of_week, format_time_of_day(s.start_time, offset=self._offset)))

    def create(self, *, day_of_week: Any, start_time: str, end_time: str, position: str, required_count: Any) -> TimeSlot:
        day_of_week = require_int(day_of_week, "Day of week", minimum=0, maximum=6)
        start = parse_hhmm(start_time, "Start time")
        end = parse_hhmm(end_time, "End time")
        if start is None or end is None:
            raise ValidationError("Start and end time are required")
        position = require_non_empty(position, "Position")
        required_count = require_int(required_count, "Required count", minimum=1)

        return self._slots.create(
            day_of_week=day_of_week,
            start_time=str(start),
            end_time=str(end),
            position=position,
            required_count=required_count,
        )

    def update(self, slot_id: int, **fields: Any) -> None:
        changes: dict[str, Any] = {}
        if fields.get("day_of_week") not in (None, ""):
            changes["day_of_week"] = require_int(fields["day_of_week"], "Day of week", minimum=0, maximum=6)
        for name, label in (("start_time", "Start time"), ("end_time", "End time")):
            t = parse_hhmm(fields.get(name), label)
            if t:
                changes[name] = str(t)
        if fields.get("position"):
            changes["position"] = require_non_empty(fields["position"], "Position")
        if fields.get("required_count") not in (None, ""):
            changes["required_count"] = require_int(fields["required_count"], "Required count", minimum=1)

        if not changes:
            raise ValidationError("Nothing to update")
        self._slots.update(int(slot_id), changes)

    def delete(self, slot_id: int) -> None:
        self._slots.delete(int(slot_id))

    def coverage(self, work_date: str) -> list[dict]:
        work_date = require_date(work_date, "Date")
        return [
            {
                "date": c.date,
                "day_of_week": c.day_of_week,
                "start_time": format_time_of_day(c.start_time, offset=self._offset),
                "end_time": format_time_of_day(c.end_time, offset=self._offset),
                "position": c.position,
                "required_count": c.required_count,
                "actual_count": c.actual_count,
                "shortage": c.shortage,
                "status": c.status.value,
            }
            for c in self._slots.coverage(work_date=work_date)
        ]

    def to_view(self, slot: TimeSlot) -> dict:
        return {
            "id": slot.slot_id,
            "day_of_week": slot.day_of_week,
            "day_name": slot.day_name,
            "start_time": format_time_of_day(slot.start_time, offset=self._offset),
            "end_time": format_time_of_day(slot.end_time, offset=self._offset),
            "position": slot.position,
            "required_count": slot.required_count,
        }
