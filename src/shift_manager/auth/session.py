from __future__ import annotations

from typing import Callable, MutableMapping, Optional

from .model import SessionUser

TOKEN_KEY = "auth_token"
USER_KEY = "auth_user"

Listener = Callable[[Optional[SessionUser]], None]


class AuthSession:
    """Single owner of the bearer token and the current user.

    The backing store is any mutable mapping: the Flask ``session`` proxy in
    the web app, a plain dict in tests. Everything else reads credentials
    through this object, and listeners are told about every change.
    """

    def __init__(self, store: MutableMapping):
        self._store = store
        self._listeners: list[Listener] = []

    def get_token(self) -> Optional[str]:
        return self._store.get(TOKEN_KEY) or None

    def get_user(self) -> Optional[SessionUser]:
        payload = self._store.get(USER_KEY)
        if not payload:
            return None
        try:
            return SessionUser.from_payload(payload)
        except (KeyError, TypeError, ValueError):
            # Stale or hand-edited payload: treat as logged out.
            return None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.get_token()) and self.get_user() is not None

    def set(self, token: str, user: SessionUser) -> None:
        self._store[TOKEN_KEY] = token
        self._store[USER_KEY] = user.to_payload()
        self._notify(user)

    def update_user(self, user: SessionUser) -> None:
        self._store[USER_KEY] = user.to_payload()
        self._notify(user)

    def clear(self) -> None:
        had_credentials = TOKEN_KEY in self._store or USER_KEY in self._store
        self._store.pop(TOKEN_KEY, None)
        self._store.pop(USER_KEY, None)
        if had_credentials:
            self._notify(None)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, user: Optional[SessionUser]) -> None:
        for listener in list(self._listeners):
            listener(user)
