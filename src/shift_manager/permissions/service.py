from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence, Union

from ..auth.model import SessionUser
from ..common.validators import require_int
from ..core.enums import PermissionFlag
from ..core.exceptions import ApiError, ValidationError
from .model import EmployeePermission
from .repository import PermissionRepository

logger = logging.getLogger(__name__)


def _truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "on", "yes"}
    return bool(value)


class PermissionService:
    """Use case: per-employee feature flags.

    Owners always hold every permission. For employees the backend row is
    used; when there is none, or the lookup fails, the defaults apply (only
    submitting shift requests is allowed).
    """

    def __init__(self, permissions: PermissionRepository):
        self._permissions = permissions

    def list_permissions(self) -> Sequence[EmployeePermission]:
        return sorted(self._permissions.list_all(), key=lambda p: p.employee_id)

    def effective(self, user: SessionUser) -> EmployeePermission:
        if user.is_owner:
            return EmployeePermission.all_granted(user.employee_id or 0)
        if user.employee_id is None:
            return EmployeePermission.defaults(0)

        try:
            found = self._permissions.for_employee(user.employee_id)
        except ApiError as e:
            logger.warning("permission lookup for employee %s failed: %s", user.employee_id, e)
            found = None
        return found or EmployeePermission.defaults(user.employee_id)

    def has_permission(self, user: SessionUser, flag: Union[PermissionFlag, str]) -> bool:
        try:
            flag = PermissionFlag(flag)
        except ValueError:
            return False
        return self.effective(user).allows(flag)

    def set_permissions(self, employee_id: Any, changes: Mapping[str, Any]) -> EmployeePermission:
        """Toggle flags for one employee; flags not named keep their value."""

        employee_id = require_int(employee_id, "Employee", minimum=1)
        unknown = set(changes) - {f.value for f in PermissionFlag}
        if unknown:
            raise ValidationError(f"Unknown permission: {', '.join(sorted(unknown))}")
        if not changes:
            raise ValidationError("Nothing to update")

        current: Optional[EmployeePermission] = self._permissions.for_employee(employee_id)
        base = current or EmployeePermission.defaults(employee_id)
        updated = replace(base, **{name: _truthy(v) for name, v in changes.items()})
        return self._permissions.save(updated)

    @staticmethod
    def to_view(p: EmployeePermission) -> dict:
        return {"employee_id": p.employee_id, "employee_name": p.employee_name or "", **p.flags()}
