"""
Authentication & session management for the IT Asset Tracker.
Handles credential checks, login, logout and per-browser session restore
from the ``sid`` URL token.

The credential table is a demo boundary: passwords are compared in cleartext
and sessions never expire.
"""
import os
import json
import logging
import secrets
import threading

import streamlit as st

from config.styles import get_login_css
from core.data import get_workspace
from core.errors import AuthError
from core.models import Principal

logger = logging.getLogger("AssetTracker")

SESSION_FILE = os.getenv("SESSION_FILE", os.path.join("data", "auth_user.json"))

# Demo accounts: username -> password
CREDENTIALS = {
    "admin1": "admin123",
    "admin2": "admin123",
    "hr1": "hr123",
    "director1": "director123",
}

DEMO_USERS = [
    Principal(id="1", username="admin1", display_name="John Admin", email="admin1@btspl.com", role="admin"),
    Principal(id="2", username="admin2", display_name="Jane Admin", email="admin2@btspl.com", role="admin"),
    Principal(id="3", username="hr1", display_name="Sarah HR", email="hr@btspl.com", role="hr"),
    Principal(id="4", username="director1", display_name="Mike Director", email="director@btspl.com", role="director"),
]


def authenticate_user(username: str, password: str):
    """
    Check a username/password pair against the credential table.

    Returns:
        tuple: (success, principal or None, AuthError or None)
    """
    expected = CREDENTIALS.get(username)
    if expected is None:
        logger.warning(f"Login failed: unknown user '{username}'")
        return False, None, AuthError(AuthError.USER_NOT_FOUND)
    if password != expected:
        logger.warning(f"Login failed: wrong password for '{username}'")
        return False, None, AuthError(AuthError.INVALID_PASSWORD)

    principal = next((u for u in DEMO_USERS if u.username == username), None)
    if principal is None:
        return False, None, AuthError(AuthError.USER_NOT_FOUND)
    logger.info(f"Login succeeded: {username} ({principal.role})")
    return True, principal, None


class SessionStore:
    """
    Signed-in principals keyed by session token, kept in one JSON file.
    Each browser carries its own token in the ``sid`` query parameter.
    """

    _lock = threading.Lock()

    def __init__(self, path: str = SESSION_FILE):
        self.path = path

    def _read(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as fh:
                sessions = json.load(fh)
        except ValueError as e:
            logger.warning(f"Discarding unreadable session file {self.path}: {e}")
            os.remove(self.path)
            return {}
        return sessions if isinstance(sessions, dict) else {}

    def _write(self, sessions: dict):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump(sessions, fh)

    def save(self, principal: Principal) -> str:
        """Store the principal under a new token and return the token."""
        token = secrets.token_urlsafe(24)
        with self._lock:
            sessions = self._read()
            sessions[token] = principal.to_dict()
            self._write(sessions)
        return token

    def load(self, token: str):
        """Return the Principal stored for ``token``, or None. An unreadable entry is dropped."""
        if not token:
            return None
        sessions = self._read()
        if token not in sessions:
            return None
        try:
            return Principal.from_dict(sessions[token])
        except (KeyError, TypeError) as e:
            logger.warning(f"Discarding unreadable session entry: {e}")
            self.clear(token)
            return None

    def clear(self, token: str):
        with self._lock:
            sessions = self._read()
            if sessions.pop(token, None) is not None:
                self._write(sessions)


# ============================================
# STREAMLIT SESSION
# ============================================
def get_session_store() -> SessionStore:
    return SessionStore(SESSION_FILE)


def init_auth_session():
    """Initialize authentication session state with defaults"""
    defaults = {
        'authenticated': False,
        'user_id': None,
        'username': None,
        'user_email': None,
        'user_full_name': None,
        'user_role': None,
        'session_token': None,
        'login_error': None,
    }
    for key, default_value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default_value


def login_user(principal: Principal, persist: bool = True):
    """Set session state after successful login."""
    st.session_state.authenticated = True
    st.session_state.user_id = principal.id
    st.session_state.username = principal.username
    st.session_state.user_email = principal.email
    st.session_state.user_full_name = principal.display_name
    st.session_state.user_role = principal.role
    st.session_state.login_error = None
    if persist:
        token = get_session_store().save(principal)
        st.session_state.session_token = token
        # Persist session token in URL for hard refresh recovery
        st.query_params["sid"] = token


def logout_user():
    """Clear session state and this browser's persisted session."""
    if st.session_state.get("session_token"):
        get_session_store().clear(st.session_state.session_token)
    st.query_params.clear()
    get_workspace().audit.log_activity_event(
        action_type="USER_LOGOUT",
        category="auth",
        user_role=st.session_state.get("user_role"),
        description=f"{st.session_state.get('username')} signed out",
    )
    st.session_state.authenticated = False
    st.session_state.user_id = None
    st.session_state.username = None
    st.session_state.user_email = None
    st.session_state.user_full_name = None
    st.session_state.user_role = None
    st.session_state.session_token = None
    st.session_state.current_page = "Dashboard"


def restore_session():
    """
    Sign this browser back in from its ``sid`` URL token (survives hard refresh).
    A browser without a token, or with an unknown one, stays signed out.
    """
    if st.session_state.authenticated:
        return
    sid = st.query_params.get("sid")
    if not sid:
        return
    principal = get_session_store().load(sid)
    if principal is None:
        st.query_params.clear()
        logger.info("Cleared unknown sid from URL")
        return
    login_user(principal, persist=False)
    st.session_state.session_token = sid
    logger.info(f"Session restored for {principal.username}")


def render_login_page():
    """Render the sign-in card with the demo credentials listed below it."""
    st.markdown(get_login_css(), unsafe_allow_html=True)
    st.markdown("<div style='height: 6vh;'></div>", unsafe_allow_html=True)

    st.markdown("""
    <div class="login-brand">
        <h1 class="login-brand-title">IT Asset Tracker</h1>
        <p class="login-brand-tagline">Sign in to manage assets and employees</p>
    </div>
    """, unsafe_allow_html=True)

    col1, col2, col3 = st.columns([1, 2, 1])

    with col2:
        with st.form("login_form", clear_on_submit=False):
            username = st.text_input("Username", placeholder="Enter your username", key="login_username")
            password = st.text_input("Password", type="password", placeholder="Enter your password",
                                     key="login_password")
            submit = st.form_submit_button("Sign In", use_container_width=True, type="primary")

            if submit:
                username_clean = username.strip() if username else ""
                if not username_clean or not password:
                    st.error("Please enter your credentials")
                else:
                    success, principal, error = authenticate_user(username_clean, password)
                    if success:
                        login_user(principal)
                        get_workspace().audit.log_activity_event(
                            action_type="USER_LOGIN",
                            category="auth",
                            user_role=principal.role,
                            description=f"{principal.username} signed in",
                        )
                        st.rerun()
                    else:
                        st.error(error.message)

        st.markdown("""
        <div class="login-demo">
            <p class="login-demo-title">Demo Credentials</p>
            <div>admin1 / admin123</div>
            <div>hr1 / hr123</div>
            <div>director1 / director123</div>
        </div>
        """, unsafe_allow_html=True)
