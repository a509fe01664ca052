from __future__ import annotations

from typing import Any, Protocol


class AuthRepository(Protocol):
    def login(self, *, email: str, password: str) -> dict[str, Any]:
        """Return the backend login payload: {"token": ..., "user": {...}}."""

        raise NotImplementedError

    def logout(self) -> None:
        raise NotImplementedError

    def profile(self) -> dict[str, Any]:
        raise NotImplementedError
