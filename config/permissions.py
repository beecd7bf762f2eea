"""
Role-Based Access Control (RBAC) system.
Defines page access, per-action permissions, and action validation.
Roles are a flat set: no role implies another.
"""
import logging

import streamlit as st

from config.constants import USER_ROLES

logger = logging.getLogger("AssetTracker")

# ============================================
# ROLE-BASED ACCESS CONTROL (RBAC) SYSTEM
# ============================================

ALL_ROLES = ["admin", "hr", "director"]

# Page access permissions
PAGE_ACCESS = {
    "Dashboard": ["admin", "hr", "director"],
    "Assets": ["admin", "hr", "director"],
    "Employees": ["admin", "hr"],
    "Settings": ["admin"],
}

# Action permissions
PERMISSIONS = {
    "action.create_asset": ["admin"],
    "action.edit_asset": ["admin"],
    "action.remove_asset": ["admin"],
    "action.assign_asset": ["admin"],
    "action.delete_asset": ["admin"],
    "action.create_employee": ["admin", "hr"],
    "action.edit_employee": ["admin", "hr"],
    "action.delete_employee": ["admin"],
    "action.manage_dropdowns": ["admin"],
    "action.export_data": ["admin", "hr", "director"],
}


def has_permission(role, required_roles):
    """True iff ``role`` is listed in ``required_roles``."""
    if not role:
        return False
    return role in required_roles


def check_page_access(page_name, role):
    """Check if a role has access to a specific page.
    Unknown pages are denied.
    """
    if page_name not in PAGE_ACCESS:
        return False
    return has_permission(role, PAGE_ACCESS[page_name])


def get_accessible_pages(role) -> list:
    """Pages visible to a role, in menu order."""
    return [page for page, roles in PAGE_ACCESS.items() if has_permission(role, roles)]


def can_edit_assets(role):
    """Check if role can create, edit, remove or assign assets."""
    return has_permission(role, PERMISSIONS["action.edit_asset"])


def can_delete_assets(role):
    return has_permission(role, PERMISSIONS["action.delete_asset"])


def can_edit_employees(role):
    """Check if role can create or edit employee records."""
    return has_permission(role, PERMISSIONS["action.edit_employee"])


def can_delete_employees(role):
    return has_permission(role, PERMISSIONS["action.delete_employee"])


# ============================================
# CENTRALIZED ACTION VALIDATION (RBAC)
# ============================================

class ActionResult:
    """Result of an action validation or execution."""
    def __init__(self, success: bool, message: str, data: dict = None):
        self.success = success
        self.message = message
        self.data = data or {}

    def __bool__(self):
        return self.success


# Action-to-Permission mapping for validation
ACTION_PERMISSIONS = {
    "create_asset": "action.create_asset",
    "edit_asset": "action.edit_asset",
    "remove_asset": "action.remove_asset",
    "assign_asset": "action.assign_asset",
    "delete_asset": "action.delete_asset",
    "create_employee": "action.create_employee",
    "edit_employee": "action.edit_employee",
    "delete_employee": "action.delete_employee",
    "manage_dropdowns": "action.manage_dropdowns",
    "export_data": "action.export_data",
}

# Human-readable action names for error messages
ACTION_DISPLAY_NAMES = {
    "create_asset": "Create Asset",
    "edit_asset": "Edit Asset",
    "remove_asset": "Remove Asset",
    "assign_asset": "Assign Asset",
    "delete_asset": "Delete Asset",
    "create_employee": "Create Employee",
    "edit_employee": "Edit Employee",
    "delete_employee": "Delete Employee",
    "manage_dropdowns": "Manage Dropdown Options",
    "export_data": "Export Data",
}


def _role_name(role):
    return USER_ROLES.get(role, {}).get("name", role)


def validate_action(action: str, role: str) -> ActionResult:
    """
    Centralized action validation - enforces RBAC at the logic level.

    Must be called before executing any mutating action, regardless of
    whether the UI already hid the control.

    Args:
        action: Action identifier (e.g., "delete_asset")
        role: Current user role

    Returns:
        ActionResult with success=True if allowed, False with message if denied
    """
    action_name = ACTION_DISPLAY_NAMES.get(action, action.replace("_", " ").title())
    role_name = _role_name(role)

    permission = ACTION_PERMISSIONS.get(action)
    if not permission:
        # Unknown action - deny by default
        return ActionResult(
            False,
            f"Access Denied: Unknown action '{action}'. Please contact an administrator."
        )

    allowed_roles = PERMISSIONS[permission]
    if has_permission(role, allowed_roles):
        return ActionResult(True, f"{action_name} permitted for {role_name}")

    allowed_role_names = [_role_name(r) for r in allowed_roles]
    return ActionResult(
        False,
        f"Access Denied: {action_name} is not permitted for your role ({role_name}). "
        f"This action requires: {', '.join(allowed_role_names)}."
    )


def get_permitted_actions(role: str) -> list:
    """List of all actions permitted for a role."""
    return [
        action for action, permission in ACTION_PERMISSIONS.items()
        if has_permission(role, PERMISSIONS[permission])
    ]


def render_access_denied(required_roles=None):
    """Render access denied message and redirect option."""
    current_role = st.session_state.get("user_role")
    role_name = _role_name(current_role)

    st.error("Access Restricted")
    st.markdown(
        f"You don't have permission to access this page. "
        f"Your current role (**{role_name}**) does not have access to this feature."
    )
    if required_roles:
        role_names = [_role_name(r) for r in required_roles]
        st.caption(f"Required role(s): {', '.join(role_names)}")

    logger.warning(f"Page access denied: role={current_role} page={st.session_state.get('current_page')}")

    if st.button("← Return to Dashboard"):
        st.session_state.current_page = "Dashboard"
        st.rerun()
