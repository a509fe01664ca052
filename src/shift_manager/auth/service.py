from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_empty
from ..core.exceptions import ApiError, AuthenticationError
from .model import SessionUser
from .repository import AuthRepository
from .session import AuthSession

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: log in/out against the backend and keep the session current."""

    def __init__(self, auth: AuthRepository, session: AuthSession):
        self._auth = auth
        self._session = session

    def login(self, email: str, password: str) -> SessionUser:
        email = require_non_empty(email, "Email")
        password = require_non_empty(password, "Password")

        payload = self._auth.login(email=email, password=password)
        token = payload.get("token")
        user_data = payload.get("user")
        if not token or not isinstance(user_data, dict):
            raise AuthenticationError("Login failed")

        user = SessionUser.from_payload(user_data)
        self._session.set(token, user)
        logger.info("user %s logged in as %s", user.user_id, user.role.value)
        return user

    def logout(self) -> None:
        """Log out; local credentials are dropped even if the backend call fails."""

        try:
            self._auth.logout()
        except (ApiError, AuthenticationError) as e:
            logger.warning("backend logout failed: %s", e)
        finally:
            self._session.clear()

    def refresh_profile(self) -> Optional[SessionUser]:
        if not self._session.get_token():
            return None
        user = SessionUser.from_payload(self._auth.profile())
        self._session.update_user(user)
        return user

    def current_user(self) -> Optional[SessionUser]:
        return self._session.get_user()
