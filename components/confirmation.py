"""
Action confirmation for destructive operations (remove, delete).
A pending action lives in session state until confirmed or cancelled.
"""

from datetime import datetime

import streamlit as st

ACTION_LABELS = {
    "remove_asset": ("Remove Asset", "The asset is marked Removed and kept for history."),
    "delete_asset": ("Delete Asset", "This permanently deletes the asset. It cannot be undone."),
    "delete_employee": ("Delete Employee", "This permanently deletes the employee record."),
    "delete_option": ("Delete Option", "Existing records keep the value; it disappears from dropdowns."),
}


def init_action_confirmation():
    """Initialize confirmation state in session"""
    if 'pending_action' not in st.session_state:
        st.session_state.pending_action = None


def request_action_confirmation(action_type: str, entity_id: str, entity_label: str, extra_data: dict = None):
    """Ask for confirmation before running ``action_type`` on ``entity_id``."""
    st.session_state.pending_action = {
        "action_type": action_type,
        "entity_id": entity_id,
        "entity_label": entity_label,
        "extra_data": extra_data or {},
        "requested_at": datetime.now().isoformat()
    }


def get_pending_action(action_type: str = None):
    action = st.session_state.get("pending_action")
    if action and action_type and action["action_type"] != action_type:
        return None
    return action


def clear_action_confirmation():
    st.session_state.pending_action = None


def render_confirmation_dialog(action_type: str):
    """
    Render the confirmation card for a pending ``action_type``.
    Returns: (confirmed: bool, cancelled: bool)
    """
    action = get_pending_action(action_type)
    if action is None:
        return False, False

    label, warning = ACTION_LABELS.get(action_type, ("Confirm Action", ""))

    st.markdown("---")
    st.markdown(f"""
    <div style="background: #fff7ed; border: 1px solid #fdba74; border-left: 4px solid #f97316;
                border-radius: 8px; padding: 16px; margin: 10px 0;">
        <div style="color: #9a3412; font-weight: 700; margin-bottom: 6px;">{label}: {action["entity_label"]}</div>
        <div style="color: #7c2d12; font-size: 0.9rem;">{warning}</div>
    </div>
    """, unsafe_allow_html=True)

    for key, value in action["extra_data"].items():
        st.caption(f"{key}: {value}")

    col1, col2, col3 = st.columns([1, 1, 2])
    with col1:
        if st.button("Confirm", key=f"confirm_{action_type}_btn", type="primary"):
            return True, False
    with col2:
        if st.button("Cancel", key=f"cancel_{action_type}_btn"):
            clear_action_confirmation()
            return False, True

    return False, False
