from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeePermission


class PermissionRepository(Protocol):
    def list_all(self) -> Sequence[EmployeePermission]:
        raise NotImplementedError

    def for_employee(self, employee_id: int) -> Optional[EmployeePermission]:
        raise NotImplementedError

    def save(self, permission: EmployeePermission) -> EmployeePermission:
        raise NotImplementedError

    def delete(self, permission_id: int) -> None:
        raise NotImplementedError
