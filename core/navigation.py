"""
Sidebar navigation & footer for the IT Asset Tracker.
Renders the sidebar with role-based menus, user info, and sign out.
"""
import logging

import streamlit as st

from config.constants import ROLE_PRIMARY_ACTION, USER_ROLES
from config.permissions import check_page_access
from core.auth import logout_user

logger = logging.getLogger("AssetTracker")

# Menu layout; visibility comes from PAGE_ACCESS
MENU_GROUPS = {
    "OVERVIEW": [
        {"name": "Dashboard", "icon": "▣", "key": "dashboard"},
    ],
    "INVENTORY": [
        {"name": "Assets", "icon": "▢", "key": "assets"},
        {"name": "Employees", "icon": "◉", "key": "employees"},
    ],
    "SYSTEM": [
        {"name": "Settings", "icon": "⚙", "key": "settings"},
    ],
}


def get_visible_menu_items(role):
    """Filter menu items based on user role"""
    visible_groups = {}
    for group_name, items in MENU_GROUPS.items():
        visible_items = [item for item in items if check_page_access(item["name"], role)]
        if visible_items:
            visible_groups[group_name] = visible_items
    return visible_groups


def render_sidebar() -> str:
    """
    Render the full sidebar: brand, nav buttons, user info, sign out.
    Returns the current page name after navigation handling.
    """
    st.sidebar.markdown("""
    <div class="sidebar-brand">
        <p class="sidebar-brand-title">IT Asset Tracker</p>
        <p>Asset &amp; employee records</p>
    </div>
    """, unsafe_allow_html=True)

    nav_clicked = None
    current_role = st.session_state.user_role
    visible_menu = get_visible_menu_items(current_role)

    for group_name, items in visible_menu.items():
        st.sidebar.markdown(f'<div class="nav-section-header">{group_name}</div>', unsafe_allow_html=True)

        for item in items:
            is_active = st.session_state.current_page == item["name"]
            is_primary_action = item["name"] == ROLE_PRIMARY_ACTION.get(current_role)

            if st.sidebar.button(
                f"{item['icon']}  {item['name']}",
                key=f"nav_{item['key']}_{current_role}",
                type="primary" if is_active else "secondary",
                help="Recommended for your role" if is_primary_action and not is_active else None
            ):
                nav_clicked = item["name"]

    # ============================================
    # USER INFO SECTION
    # ============================================
    user_display_name = st.session_state.user_full_name or st.session_state.username
    role_config = USER_ROLES.get(current_role, {"name": current_role, "description": ""})

    st.sidebar.markdown(f"""
    <div class="user-info-card">
        <div class="user-name">{user_display_name}</div>
        <div class="user-email">{st.session_state.user_email or ''}</div>
        <span class="role-badge-compact {current_role}">{role_config['name']}</span>
    </div>
    """, unsafe_allow_html=True)

    if st.sidebar.button("Sign Out", key="logout_btn", use_container_width=True):
        logout_user()
        st.rerun()

    if nav_clicked and nav_clicked != st.session_state.current_page:
        st.session_state.current_page = nav_clicked

    page = st.session_state.current_page

    # Redirect away from pages the role cannot open
    if not check_page_access(page, current_role):
        logger.warning(f"Redirected role={current_role} away from '{page}'")
        st.session_state.access_warning = f"Access denied to '{page}'. You have been redirected to Dashboard."
        st.session_state.current_page = "Dashboard"
        page = "Dashboard"

    if st.session_state.get("access_warning"):
        st.warning(st.session_state.access_warning)
        st.session_state.access_warning = None

    return page


def render_footer():
    """Render the sidebar footer with version info."""
    st.sidebar.markdown("""
    <div class="sidebar-footer">
        <div class="version">IT Asset Tracker v1.0</div>
        <div class="tech">Streamlit + in-memory data</div>
    </div>
    """, unsafe_allow_html=True)
