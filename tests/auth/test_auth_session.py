from shift_manager.auth.model import SessionUser
from shift_manager.auth.session import TOKEN_KEY, USER_KEY, AuthSession
from shift_manager.core.enums import Role


def _user(**kw):
    data = dict(user_id=5, name="Hana", email="hana@example.com", role=Role.EMPLOYEE, employee_id=12)
    data.update(kw)
    return SessionUser(**data)


def test_set_and_get():
    store = {}
    session = AuthSession(store)
    session.set("tok", _user())

    assert store[TOKEN_KEY] == "tok"
    assert store[USER_KEY]["role"] == "employee"
    assert session.get_token() == "tok"
    assert session.get_user() == _user()
    assert session.is_authenticated


def test_listeners_see_every_change_until_unsubscribed():
    session = AuthSession({})
    seen = []
    unsubscribe = session.subscribe(seen.append)

    session.set("tok", _user())
    session.update_user(_user(name="Hana S."))
    session.clear()
    unsubscribe()
    session.set("tok2", _user())

    assert [u.name if u else None for u in seen] == ["Hana", "Hana S.", None]


def test_clear_without_credentials_is_silent():
    session = AuthSession({})
    seen = []
    session.subscribe(seen.append)
    session.clear()
    assert seen == []


def test_broken_user_payload_reads_as_logged_out():
    session = AuthSession({TOKEN_KEY: "tok", USER_KEY: {"name": "no id"}})
    assert session.get_user() is None
    assert not session.is_authenticated


def test_payload_round_trip_keeps_missing_employee_id():
    owner = SessionUser.from_payload({"id": 1, "name": "Boss", "email": "b@example.com", "role": "owner"})
    assert owner.is_owner
    assert owner.employee_id is None
    assert SessionUser.from_payload(owner.to_payload()) == owner
