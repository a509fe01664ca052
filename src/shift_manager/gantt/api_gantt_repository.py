from __future__ import annotations

from typing import Optional

from ..api.client import ApiClient
from ..core.exceptions import ApiError
from .model import GanttSettings
from .repository import GanttSettingsRepository


class ApiGanttSettingsRepository(GanttSettingsRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def get(self) -> Optional[GanttSettings]:
        try:
            r = self._client.get("/gantt-settings", fallback="Could not load chart settings")
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        if not r:
            return None
        return GanttSettings(start_hour=int(r["start_hour"]), end_hour=int(r["end_hour"]))

    def save(self, settings: GanttSettings) -> GanttSettings:
        self._client.post(
            "/gantt-settings",
            json={"start_hour": settings.start_hour, "end_hour": settings.end_hour},
            fallback="Could not save chart settings",
        )
        return settings
