from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from .model import PayrollSummary
from .repository import PayrollRepository


def _to_summary(r: dict) -> PayrollSummary:
    return PayrollSummary(
        employee_id=int(r["employee_id"]),
        employee_name=r.get("employee_name") or "",
        total_hours=float(r.get("total_hours") or 0),
        total_break_time=int(r.get("total_break_time") or 0),
        net_hours=float(r.get("net_hours") or 0),
        hourly_wage=int(r.get("hourly_wage") or 0),
        total_salary=int(r.get("total_salary") or 0),
        shift_count=int(r.get("shift_count") or 0),
    )


class ApiPayrollRepository(PayrollRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def calculate(self, *, year: int, month: int, employee_id: Optional[int] = None) -> Sequence[PayrollSummary]:
        rows = self._client.get(
            "/payroll/calculate",
            params={"year": int(year), "month": f"{int(month):02d}", "employee_id": employee_id},
            fallback="Could not calculate payroll",
        ) or []
        return [_to_summary(r) for r in rows]

    def for_employee(self, employee_id: int, *, year: int, month: int) -> Optional[PayrollSummary]:
        r = self._client.get(
            f"/payroll/employee/{int(employee_id)}",
            params={"year": int(year), "month": f"{int(month):02d}"},
            fallback="Could not load payroll data",
        )
        if not r or "employee_id" not in r:
            return None
        return _to_summary(r)
