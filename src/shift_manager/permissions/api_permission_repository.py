from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..core.enums import PermissionFlag
from ..core.exceptions import ApiError
from .model import EmployeePermission
from .repository import PermissionRepository


def _to_permission(r: dict) -> EmployeePermission:
    defaults = EmployeePermission.defaults(int(r["employee_id"]))
    flags = {}
    for flag in PermissionFlag:
        value = r.get(flag.value)
        flags[flag.value] = defaults.allows(flag) if value is None else bool(value)
    return EmployeePermission(
        employee_id=int(r["employee_id"]),
        permission_id=int(r["id"]) if r.get("id") is not None else None,
        employee_name=r.get("employee_name"),
        **flags,
    )


class ApiPermissionRepository(PermissionRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[EmployeePermission]:
        rows = self._client.get("/permissions", fallback="Could not load permissions") or []
        return [_to_permission(r) for r in rows]

    def for_employee(self, employee_id: int) -> Optional[EmployeePermission]:
        try:
            r = self._client.get(
                f"/permissions/employee/{int(employee_id)}",
                fallback="Could not load permissions",
            )
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        return _to_permission(r) if r else None

    def save(self, permission: EmployeePermission) -> EmployeePermission:
        body = {"employee_id": permission.employee_id, **permission.flags()}
        r = self._client.post("/permissions", json=body, fallback="Could not save permissions")
        if not r or "employee_id" not in r:
            return permission
        return _to_permission(r)

    def delete(self, permission_id: int) -> None:
        self._client.delete(f"/permissions/{int(permission_id)}", fallback="Could not delete permissions")
