from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_GANTT_END_HOUR, DEFAULT_GANTT_START_HOUR


@dataclass(frozen=True)
class GanttSettings:
    """Visible hour range of the daily shift chart; end may run past midnight."""

    start_hour: int = DEFAULT_GANTT_START_HOUR
    end_hour: int = DEFAULT_GANTT_END_HOUR

    @property
    def span_hours(self) -> int:
        return self.end_hour - self.start_hour
