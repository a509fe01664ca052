from __future__ import annotations

from typing import Optional, Protocol

from .model import GanttSettings


class GanttSettingsRepository(Protocol):
    def get(self) -> Optional[GanttSettings]:
        raise NotImplementedError

    def save(self, settings: GanttSettings) -> GanttSettings:
        raise NotImplementedError
