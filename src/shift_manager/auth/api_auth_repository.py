from __future__ import annotations

from typing import Any

from ..api.client import ApiClient
from .repository import AuthRepository


class ApiAuthRepository(AuthRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def login(self, *, email: str, password: str) -> dict[str, Any]:
        return self._client.post(
            "/auth/login",
            json={"email": email, "password": password},
            fallback="Login failed",
        ) or {}

    def logout(self) -> None:
        self._client.post("/auth/logout", fallback="Logout failed")

    def profile(self) -> dict[str, Any]:
        return self._client.get("/auth/profile", fallback="Could not load your profile") or {}
