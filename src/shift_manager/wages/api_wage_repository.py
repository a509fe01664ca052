from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..core.exceptions import ApiError
from .model import HourlyWage
from .repository import HourlyWageRepository


def _to_wage(r: dict) -> HourlyWage:
    return HourlyWage(
        wage_id=int(r.get("id") or 0),
        employee_id=int(r["employee_id"]),
        hourly_wage=int(r.get("hourly_wage") or 0),
        effective_date=r.get("effective_date") or "",
        employee_name=r.get("employee_name"),
    )


class ApiHourlyWageRepository(HourlyWageRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list(self, *, employee_id: Optional[int] = None) -> Sequence[HourlyWage]:
        rows = self._client.get(
            "/hourly-wages",
            params={"employee_id": employee_id},
            fallback="Could not load hourly wages",
        ) or []
        return [_to_wage(r) for r in rows]

    def history(self, employee_id: int) -> Sequence[HourlyWage]:
        rows = self._client.get(
            "/hourly-wages/history",
            params={"employee_id": int(employee_id)},
            fallback="Could not load the wage history",
        ) or []
        return [_to_wage(r) for r in rows]

    def current(self, employee_id: int) -> Optional[HourlyWage]:
        try:
            r = self._client.get(
                "/hourly-wages/current",
                params={"employee_id": int(employee_id)},
                fallback="Could not load the current wage",
            )
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        return _to_wage(r) if r else None

    def create(self, *, employee_id: int, hourly_wage: int, effective_date: str) -> HourlyWage:
        r = self._client.post(
            "/hourly-wages",
            json={"employee_id": int(employee_id), "hourly_wage": int(hourly_wage), "effective_date": effective_date},
            fallback="Could not save the hourly wage",
        )
        return _to_wage(r)

    def update(self, wage_id: int, *, hourly_wage: int, effective_date: str) -> None:
        self._client.put(
            f"/hourly-wages/{int(wage_id)}",
            json={"hourly_wage": int(hourly_wage), "effective_date": effective_date},
            fallback="Could not update the hourly wage",
        )

    def delete(self, wage_id: int) -> None:
        self._client.delete(f"/hourly-wages/{int(wage_id)}", fallback="Could not delete the hourly wage")
