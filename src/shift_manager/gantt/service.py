from __future__ import annotations

import logging
from typing import Any

from ..common.validators import require_int
from ..core.constants import MAX_GANTT_END_HOUR
from ..core.exceptions import ApiError, ValidationError
from .model import GanttSettings
from .repository import GanttSettingsRepository

logger = logging.getLogger(__name__)


class GanttSettingsService:
    def __init__(self, settings: GanttSettingsRepository):
        self._settings = settings

    def get(self) -> GanttSettings:
        """Stored settings, or the 0-24 default when none are stored or loading fails."""

        try:
            found = self._settings.get()
        except ApiError as e:
            logger.warning("loading chart settings failed: %s", e)
            found = None
        return found or GanttSettings()

    def save(self, *, start_hour: Any, end_hour: Any) -> GanttSettings:
        start = require_int(start_hour, "Start hour", minimum=0, maximum=23)
        end = require_int(end_hour, "End hour", minimum=0, maximum=MAX_GANTT_END_HOUR)
        if end <= start:
            raise ValidationError("End hour must be after start hour")
        return self._settings.save(GanttSettings(start_hour=start, end_hour=end))

    @staticmethod
    def to_view(s: GanttSettings) -> dict:
        return {"start_hour": s.start_hour, "end_hour": s.end_hour, "span_hours": s.span_hours}
