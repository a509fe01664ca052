import pytest

from shift_manager.auth.service import AuthService
from shift_manager.auth.session import AuthSession
from shift_manager.core.enums import Role
from shift_manager.core.exceptions import ApiError, AuthenticationError, ValidationError


class FakeAuthRepo:
    def __init__(self, login_payload=None, logout_error=None, profile=None):
        self.login_payload = login_payload or {}
        self.logout_error = logout_error
        self.profile_payload = profile or {}
        self.logins = []

    def login(self, *, email, password):
        self.logins.append((email, password))
        return self.login_payload

    def logout(self):
        if self.logout_error:
            raise self.logout_error

    def profile(self):
        return self.profile_payload


USER = {"id": 3, "name": "Ken", "email": "ken@example.com", "role": "employee", "employee_id": 7}


def test_login_stores_token_and_user():
    store = {}
    svc = AuthService(FakeAuthRepo({"token": "t0k", "user": USER}), AuthSession(store))

    user = svc.login(" ken@example.com ", "secret")

    assert user.role == Role.EMPLOYEE
    assert user.employee_id == 7
    assert svc.current_user() == user
    assert AuthSession(store).get_token() == "t0k"


def test_login_requires_email_and_password():
    repo = FakeAuthRepo()
    svc = AuthService(repo, AuthSession({}))
    with pytest.raises(ValidationError):
        svc.login("", "secret")
    with pytest.raises(ValidationError):
        svc.login("ken@example.com", "  ")
    assert repo.logins == []


def test_login_without_token_fails():
    svc = AuthService(FakeAuthRepo({"user": USER}), AuthSession({}))
    with pytest.raises(AuthenticationError):
        svc.login("ken@example.com", "secret")


def test_logout_clears_credentials_even_if_backend_fails():
    session = AuthSession({})
    svc = AuthService(FakeAuthRepo({"token": "t", "user": USER}, logout_error=ApiError("down")), session)
    svc.login("ken@example.com", "secret")

    svc.logout()

    assert not session.is_authenticated


def test_refresh_profile_updates_user():
    profile = dict(USER, name="Ken Sato")
    session = AuthSession({})
    svc = AuthService(FakeAuthRepo({"token": "t", "user": USER}, profile=profile), session)

    assert svc.refresh_profile() is None
    svc.login("ken@example.com", "secret")
    assert svc.refresh_profile().name == "Ken Sato"
    assert session.get_user().name == "Ken Sato"
