from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CoverageStatus

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


@dataclass(frozen=True)
class TimeSlot:
    """Staffing requirement for a weekday time band and position."""

    slot_id: int
    day_of_week: int  # 0 = Sunday
    start_time: str
    end_time: str
    position: str
    required_count: int

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_of_week] if 0 <= self.day_of_week <= 6 else "Unknown"


@dataclass(frozen=True)
class CoverageSummary:
    date: str
    day_of_week: int
    start_time: str
    end_time: str
    position: str
    required_count: int
    actual_count: int

    @property
    def shortage(self) -> int:
        return max(self.required_count - self.actual_count, 0)

    @property
    def status(self) -> CoverageStatus:
        if self.actual_count >= self.required_count:
            return CoverageStatus.SUFFICIENT
        return CoverageStatus.SHORTAGE
