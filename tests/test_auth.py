import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from core import auth
from core.auth import authenticate_user, SessionStore, DEMO_USERS
from core.errors import AuthError


def test_valid_credentials_return_principal():
    success, principal, error = authenticate_user("hr1", "hr123")
    assert success
    assert error is None
    assert principal.role == "hr"
    assert principal.display_name == "Sarah HR"


def test_unknown_user():
    success, principal, error = authenticate_user("ghost", "admin123")
    assert not success and principal is None
    assert error.kind == AuthError.USER_NOT_FOUND


def test_wrong_password():
    success, _, error = authenticate_user("admin1", "wrong")
    assert not success
    assert error.kind == AuthError.INVALID_PASSWORD
    assert error.message == "Invalid password"


def test_session_store_keeps_one_principal_per_token(tmp_path):
    store = SessionStore(str(tmp_path / "session" / "sessions.json"))
    assert store.load("missing") is None

    admin_token = store.save(DEMO_USERS[0])
    director_token = store.save(DEMO_USERS[3])
    assert admin_token != director_token
    assert store.load(admin_token) == DEMO_USERS[0]
    assert store.load(director_token) == DEMO_USERS[3]

    store.clear(admin_token)
    assert store.load(admin_token) is None
    assert store.load(director_token) == DEMO_USERS[3]
    store.clear(admin_token)


def test_blank_token_loads_nothing(tmp_path):
    store = SessionStore(str(tmp_path / "sessions.json"))
    store.save(DEMO_USERS[0])
    assert store.load("") is None
    assert store.load(None) is None


def test_corrupt_session_file_is_discarded(tmp_path):
    path = tmp_path / "sessions.json"
    path.write_text("{not json", encoding="utf-8")
    assert SessionStore(str(path)).load("abc") is None
    assert not path.exists()


def test_session_entry_missing_fields_is_discarded(tmp_path):
    path = tmp_path / "sessions.json"
    path.write_text(json.dumps({"abc": {"username": "admin1"}}), encoding="utf-8")
    store = SessionStore(str(path))
    assert store.load("abc") is None
    assert json.loads(path.read_text(encoding="utf-8")) == {}


# ============================================
# BROWSER SESSIONS
# ============================================
APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def session_file(tmp_path, monkeypatch):
    path = tmp_path / "sessions.json"
    monkeypatch.setattr(auth, "SESSION_FILE", str(path))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    return path


def _open_app(sid=None):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    if sid is not None:
        at.query_params["sid"] = sid
    return at.run()


def _sign_in(at, username, password):
    at.text_input(key="login_username").input(username)
    at.text_input(key="login_password").input(password)
    next(b for b in at.button if b.label == "Sign In").click()
    return at.run()


def test_new_browser_session_starts_signed_out(session_file):
    first = _open_app()
    assert first.session_state["authenticated"] is False
    _sign_in(first, "admin1", "admin123")
    assert first.session_state["username"] == "admin1"

    second = _open_app()
    assert second.session_state["authenticated"] is False
    assert second.session_state["user_role"] is None


def test_sid_token_restores_only_its_own_session(session_file):
    director = _sign_in(_open_app(), "director1", "director123")
    _sign_in(_open_app(), "admin1", "admin123")
    token = director.session_state["session_token"]
    assert token

    reloaded = _open_app(sid=token)
    assert reloaded.session_state["username"] == "director1"
    assert reloaded.session_state["user_role"] == "director"

    forged = _open_app(sid="not-a-real-token")
    assert forged.session_state["authenticated"] is False
