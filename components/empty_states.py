"""
Empty state and success state components.
Consistent UI for when a list has nothing to show.
"""

import streamlit as st


EMPTY_STATES = {
    "no_assets": {
        "icon": "box",
        "title": "No Assets Yet",
        "message": "The asset register is empty. Add your first asset to get started.",
        "color": "#3b82f6"
    },
    "no_matching_assets": {
        "icon": "search",
        "title": "No Matching Assets",
        "message": "No assets match the current search and filters.",
        "color": "#64748b"
    },
    "no_employees": {
        "icon": "users",
        "title": "No Employees Yet",
        "message": "Add employees so assets can be assigned to them.",
        "color": "#8b5cf6"
    },
    "no_matching_employees": {
        "icon": "search",
        "title": "No Matching Employees",
        "message": "No employees match the current search and filters.",
        "color": "#64748b"
    },
    "no_options": {
        "icon": "list",
        "title": "No Options",
        "message": "This category has no values yet. Forms accept free text until one is added.",
        "color": "#f59e0b"
    },
    "no_removed_assets": {
        "icon": "check",
        "title": "No Removed Assets",
        "message": "No asset has been taken out of service.",
        "color": "#10b981"
    },
    "no_data": {
        "icon": "folder",
        "title": "No Data Available",
        "message": "Nothing to show here yet.",
        "color": "#64748b"
    }
}

# SVG icon paths (no emojis)
EMPTY_STATE_ICONS = {
    "box": '<path d="M21 16V8a2 2 0 0 0-1-1.73l-7-4a2 2 0 0 0-2 0l-7 4A2 2 0 0 0 3 8v8a2 2 0 0 0 1 1.73l7 4a2 2 0 0 0 2 0l7-4A2 2 0 0 0 21 16z"></path><polyline points="3.27 6.96 12 12.01 20.73 6.96"></polyline><line x1="12" y1="22.08" x2="12" y2="12"></line>',
    "search": '<circle cx="11" cy="11" r="8"></circle><line x1="21" y1="21" x2="16.65" y2="16.65"></line>',
    "users": '<path d="M17 21v-2a4 4 0 0 0-4-4H5a4 4 0 0 0-4 4v2"></path><circle cx="9" cy="7" r="4"></circle><path d="M23 21v-2a4 4 0 0 0-3-3.87"></path><path d="M16 3.13a4 4 0 0 1 0 7.75"></path>',
    "list": '<line x1="8" y1="6" x2="21" y2="6"></line><line x1="8" y1="12" x2="21" y2="12"></line><line x1="8" y1="18" x2="21" y2="18"></line><line x1="3" y1="6" x2="3.01" y2="6"></line><line x1="3" y1="12" x2="3.01" y2="12"></line><line x1="3" y1="18" x2="3.01" y2="18"></line>',
    "check": '<path d="M22 11.08V12a10 10 0 1 1-5.93-9.14"></path><polyline points="22 4 12 14.01 9 11.01"></polyline>',
    "folder": '<path d="M22 19a2 2 0 0 1-2 2H4a2 2 0 0 1-2-2V5a2 2 0 0 1 2-2h5l2 3h9a2 2 0 0 1 2 2z"></path>'
}


def render_empty_state(state_key: str, custom_message: str = None) -> None:
    """
    Render a consistent empty state UI component.

    Args:
        state_key: Key from EMPTY_STATES config
        custom_message: Optional override for the message
    """
    state = EMPTY_STATES.get(state_key, EMPTY_STATES["no_data"])
    message = custom_message or state["message"]
    icon_path = EMPTY_STATE_ICONS.get(state['icon'], EMPTY_STATE_ICONS['folder'])

    st.markdown(f"""
    <div class="empty-state" style="border-color: {state['color']}40;">
        <svg width="44" height="44" viewBox="0 0 24 24" fill="none" stroke="{state['color']}" stroke-width="1.5" stroke-linecap="round" stroke-linejoin="round" style="opacity: 0.7;">
            {icon_path}
        </svg>
        <div class="empty-title">{state['title']}</div>
        <div>{message}</div>
    </div>
    """, unsafe_allow_html=True)


def render_success_state(title: str, message: str) -> None:
    """Render an all-clear state."""
    st.markdown(f"""
    <div style="
        background: #10b98110;
        border: 1px solid #10b98125;
        border-radius: 12px;
        padding: 24px;
        text-align: center;
        margin: 12px 0;
    ">
        <svg width="36" height="36" viewBox="0 0 24 24" fill="none" stroke="#10b981" stroke-width="1.5" stroke-linecap="round" stroke-linejoin="round">
            {EMPTY_STATE_ICONS['check']}
        </svg>
        <div style="font-weight: 600; color: #065f46; margin: 6px 0 2px 0;">{title}</div>
        <div style="font-size: 0.875rem; color: #047857;">{message}</div>
    </div>
    """, unsafe_allow_html=True)
