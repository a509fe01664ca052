from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import PermissionFlag


@dataclass(frozen=True)
class EmployeePermission:
    employee_id: int
    can_view_other_shifts: bool = False
    can_view_payroll: bool = False
    can_edit_attendance: bool = False
    can_submit_shift_requests: bool = True
    permission_id: Optional[int] = None
    employee_name: Optional[str] = None

    @classmethod
    def defaults(cls, employee_id: int) -> "EmployeePermission":
        return cls(employee_id=int(employee_id))

    @classmethod
    def all_granted(cls, employee_id: int) -> "EmployeePermission":
        return cls(employee_id=int(employee_id), **{f.value: True for f in PermissionFlag})

    def allows(self, flag: PermissionFlag) -> bool:
        return bool(getattr(self, flag.value))

    def flags(self) -> dict[str, bool]:
        return {f.value: self.allows(f) for f in PermissionFlag}
