from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..auth.session import AuthSession
from ..core.constants import DEFAULT_API_ERROR_MESSAGE, DEFAULT_API_TIMEOUT_SECONDS
from ..core.exceptions import ApiError, AuthenticationError

logger = logging.getLogger(__name__)


def _error_message(resp: requests.Response) -> Optional[str]:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("error")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


class ApiClient:
    """Uniform JSON client for the backend REST API.

    Every request carries the bearer token held by the auth session. A 401
    clears the session and raises AuthenticationError; any other failure
    raises ApiError with the backend's message or the caller's fallback.
    Nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        auth_session: AuthSession,
        *,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        http: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._auth = auth_session
        self._timeout = float(timeout)
        self._http = http or requests.Session()

    def get(self, path: str, *, params: Optional[dict] = None, fallback: str = DEFAULT_API_ERROR_MESSAGE) -> Any:
        return self.request("GET", path, params=params, fallback=fallback)

    def post(self, path: str, *, json: Any = None, fallback: str = DEFAULT_API_ERROR_MESSAGE) -> Any:
        return self.request("POST", path, json=json, fallback=fallback)

    def put(self, path: str, *, json: Any = None, fallback: str = DEFAULT_API_ERROR_MESSAGE) -> Any:
        return self.request("PUT", path, json=json, fallback=fallback)

    def delete(self, path: str, *, fallback: str = DEFAULT_API_ERROR_MESSAGE) -> Any:
        return self.request("DELETE", path, fallback=fallback)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict] = None,
        json: Any = None,
        fallback: str = DEFAULT_API_ERROR_MESSAGE,
    ) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self._auth.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            resp = self._http.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(fallback) from e

        if resp.status_code == 401:
            logger.info("%s %s rejected with 401, clearing credentials", method, url)
            self._auth.clear()
            raise AuthenticationError(_error_message(resp) or "Your session has expired. Please log in again.")

        if resp.status_code >= 400:
            message = _error_message(resp) or fallback
            logger.warning("%s %s returned %s: %s", method, url, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code)

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            logger.warning("%s %s returned a non-JSON body", method, url)
            raise ApiError(fallback, status_code=resp.status_code) from e
