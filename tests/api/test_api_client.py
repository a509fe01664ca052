import json as jsonlib

import pytest
import requests

from shift_manager.api.client import ApiClient
from shift_manager.auth.model import SessionUser
from shift_manager.auth.session import AuthSession
from shift_manager.core.enums import Role
from shift_manager.core.exceptions import ApiError, AuthenticationError


class FakeResponse:
    def __init__(self, status_code=200, body=None, raw=None):
        self.status_code = status_code
        if raw is not None:
            self.content = raw.encode()
        elif body is not None:
            self.content = jsonlib.dumps(body).encode()
        else:
            self.content = b""

    def json(self):
        return jsonlib.loads(self.content.decode())


class FakeHttp:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


def _client(*responses, token=None):
    store = {}
    session = AuthSession(store)
    if token:
        session.set(token, SessionUser(user_id=1, name="Owner", email="o@example.com", role=Role.OWNER))
    http = FakeHttp(*responses)
    return ApiClient("http://backend.test/api/", session, timeout=5, http=http), http, session


def test_bearer_token_and_url():
    client, http, _ = _client(FakeResponse(200, [{"id": 1}]), token="abc")

    assert client.get("/employees", params={"year": 2025}) == [{"id": 1}]
    call = http.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://backend.test/api/employees"
    assert call["headers"]["Authorization"] == "Bearer abc"
    assert call["params"] == {"year": 2025}
    assert call["timeout"] == 5.0


def test_no_authorization_header_without_token():
    client, http, _ = _client(FakeResponse(200, {"ok": True}))
    client.post("/auth/login", json={"email": "a"})
    assert "Authorization" not in http.calls[0]["headers"]
    assert http.calls[0]["json"] == {"email": "a"}


def test_backend_error_message_is_used():
    client, _, _ = _client(FakeResponse(400, {"error": "Employee not found"}))
    with pytest.raises(ApiError) as exc:
        client.get("/employees/9", fallback="Could not load the employee")
    assert str(exc.value) == "Employee not found"
    assert exc.value.status_code == 400


def test_fallback_message_when_body_has_no_error():
    client, _, _ = _client(FakeResponse(500, raw="<html>oops</html>"))
    with pytest.raises(ApiError) as exc:
        client.get("/shifts", fallback="Could not load shifts")
    assert str(exc.value) == "Could not load shifts"
    assert exc.value.status_code == 500


def test_network_failure_uses_fallback():
    client, _, _ = _client(requests.ConnectionError("refused"))
    with pytest.raises(ApiError) as exc:
        client.get("/shifts", fallback="Could not load shifts")
    assert str(exc.value) == "Could not load shifts"
    assert exc.value.status_code is None


def test_unauthorized_clears_session():
    client, _, session = _client(FakeResponse(401, {"error": "token expired"}), token="abc")
    seen = []
    session.subscribe(seen.append)

    with pytest.raises(AuthenticationError):
        client.get("/employees")

    assert session.get_token() is None
    assert session.get_user() is None
    assert seen == [None]


def test_empty_body_returns_none():
    client, _, _ = _client(FakeResponse(204))
    assert client.delete("/shifts/1") is None


def test_non_json_success_body_is_an_error():
    client, _, _ = _client(FakeResponse(200, raw="not json"))
    with pytest.raises(ApiError):
        client.get("/shifts", fallback="Could not load shifts")
