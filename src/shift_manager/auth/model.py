from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class SessionUser:
    """The logged-in account as returned by the backend profile."""

    user_id: int
    name: str
    email: str
    role: Role
    employee_id: Optional[int] = None

    @property
    def is_owner(self) -> bool:
        return self.role == Role.OWNER

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "SessionUser":
        employee_id = data.get("employee_id")
        return cls(
            user_id=int(data["id"]),
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            role=Role(data.get("role") or Role.EMPLOYEE.value),
            employee_id=int(employee_id) if employee_id else None,
        )

    def to_payload(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "employee_id": self.employee_id,
        }
