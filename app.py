"""
IT Asset Tracker v1.0
A Streamlit admin dashboard for IT assets, employees and dropdown values
Role-based pages and actions, warranty tracking, CSV/Excel export
"""

import os
import logging

import streamlit as st
from dotenv import load_dotenv

from config.permissions import check_page_access, render_access_denied
from config.styles import get_anti_flicker_css, get_dashboard_css
from components.confirmation import init_action_confirmation
from components.feedback import render_error_state
from core.auth import init_auth_session, restore_session, render_login_page
from core.data import get_workspace
from core.errors import AssetTrackerError, log_error, classify_error, user_message_for
from core.navigation import render_sidebar, render_footer
from views import PAGE_REGISTRY
from views.context import AppContext

# Load environment variables from .env file
load_dotenv()

# ============================================
# LOGGING
# ============================================
# Configure logging - technical errors go to file, not UI
LOG_DIR = os.getenv("LOG_DIR", "logs")
os.makedirs(LOG_DIR, exist_ok=True)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s | %(levelname)s | %(name)s | %(message)s',
    handlers=[
        logging.FileHandler(os.path.join(LOG_DIR, "app.log"), encoding='utf-8'),
        logging.StreamHandler() if os.getenv("DEBUG", "false").lower() == "true" else logging.NullHandler()
    ]
)
logger = logging.getLogger("AssetTracker")

# Page configuration
st.set_page_config(
    page_title="IT Asset Tracker",
    page_icon="🖥",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Hide the UI until auth is resolved; overridden by login or dashboard CSS
st.markdown(get_anti_flicker_css(), unsafe_allow_html=True)

# ============================================
# AUTH
# ============================================
init_auth_session()
restore_session()

if not st.session_state.authenticated:
    render_login_page()
    st.stop()

# ============================================
# AUTHENTICATED APP
# ============================================
st.markdown(get_dashboard_css(), unsafe_allow_html=True)

if "current_page" not in st.session_state:
    st.session_state.current_page = "Dashboard"
init_action_confirmation()

page = render_sidebar()
render_footer()

# Sign out inside the sidebar ends the run with a rerun, so a role is set here
user_role = st.session_state.user_role

if not check_page_access(page, user_role):
    render_access_denied()
    st.stop()

ctx = AppContext(
    workspace=get_workspace(),
    user_role=user_role,
    username=st.session_state.username or "",
)

# ============================================
# PAGE DISPATCH
# ============================================
page_renderer = PAGE_REGISTRY.get(page)
if page_renderer is None:
    st.error(f"Unknown page: {page}")
else:
    try:
        page_renderer(ctx)
    except AssetTrackerError as e:
        logger.warning(f"{page}: {e}")
        render_error_state(user_message_for(e), error_type=classify_error(e))
    except Exception as e:
        error_id = log_error(e, f"render_{page}", user_role)
        render_error_state(user_message_for(e), error_type="general", error_id=error_id)
