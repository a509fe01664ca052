from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..core.exceptions import ApiError
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["id"]),
        name=r.get("name") or "",
        hourly_wage=int(r.get("hourly_wage") or 0),
        created_at=r.get("created_at"),
    )


class ApiEmployeeRepository(EmployeeRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Employee]:
        rows = self._client.get("/employees", fallback="Could not load employees") or []
        return [_to_employee(r) for r in rows]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        try:
            r = self._client.get(f"/employees/{int(employee_id)}", fallback="Could not load the employee")
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        return _to_employee(r) if r else None

    def create(self, *, name: str, hourly_wage: int) -> Employee:
        r = self._client.post(
            "/employees",
            json={"name": name, "hourly_wage": int(hourly_wage)},
            fallback="Could not register the employee",
        )
        return _to_employee(r)

    def update(self, employee_id: int, *, name: str, hourly_wage: int) -> Employee:
        r = self._client.put(
            f"/employees/{int(employee_id)}",
            json={"name": name, "hourly_wage": int(hourly_wage)},
            fallback="Could not update the employee",
        )
        if not r or "id" not in r:
            return Employee(employee_id=int(employee_id), name=name, hourly_wage=int(hourly_wage))
        return _to_employee(r)

    def delete(self, employee_id: int) -> None:
        self._client.delete(f"/employees/{int(employee_id)}", fallback="Could not delete the employee")
