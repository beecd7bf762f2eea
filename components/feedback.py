"""
Error, warning, and action feedback components.
Handles error states, inline messages, status badges and post-rerun flash messages.
"""

import os

import streamlit as st

from config.constants import STATUS_COLORS, WARRANTY_COLORS


def render_status_badge(value: str, colors: dict = None) -> str:
    """HTML pill for an asset or warranty status."""
    palette = colors or {**WARRANTY_COLORS, **STATUS_COLORS}
    color = palette.get(value, "#64748b")
    return f'<span class="status-badge" style="background: {color};">{value}</span>'


def render_warranty_badge(value: str) -> str:
    return render_status_badge(value, WARRANTY_COLORS)


def render_error_state(
    error_message: str,
    error_type: str = "general",
    technical_details: str = None,
    error_id: str = None
):
    """
    Render an error card. Shows the error reference ID instead of technical details.

    Args:
        error_message: User-friendly error message
        error_type: Type of error (general, data, permission)
        technical_details: Technical error details (only shown in debug mode)
        error_id: Error reference ID for support
    """
    error_configs = {
        "general": {"color": "#ef4444", "bg": "#fef2f2", "border": "#fecaca"},
        "data": {"color": "#3b82f6", "bg": "#eff6ff", "border": "#bfdbfe"},
        "permission": {"color": "#8b5cf6", "bg": "#f5f3ff", "border": "#ddd6fe"},
    }
    config = error_configs.get(error_type, error_configs["general"])
    ref_text = f"<br><small style='color: #9ca3af;'>Reference: {error_id}</small>" if error_id else ""

    st.markdown(f"""
    <div style="
        background: {config['bg']};
        border: 1px solid {config['border']};
        border-left: 4px solid {config['color']};
        border-radius: 8px;
        padding: 20px;
        margin: 15px 0;
    ">
        <div style="font-weight: 600; color: {config['color']}; margin-bottom: 5px;">
            Something went wrong
        </div>
        <div style="color: #374151; font-size: 0.95rem;">
            {error_message}{ref_text}
        </div>
    </div>
    """, unsafe_allow_html=True)

    is_debug = os.getenv("DEBUG", "false").lower() == "true"
    if technical_details and is_debug:
        with st.expander("Technical Details (Debug Mode)", expanded=False):
            st.code(technical_details, language="text")


def render_inline_error(message: str):
    """Compact error list, one line per message (used by form validation)."""
    for line in message if isinstance(message, (list, tuple)) else [message]:
        st.markdown(f"""
        <div style="
            background: #fef2f2;
            border: 1px solid #fecaca;
            border-radius: 6px;
            padding: 8px 14px;
            color: #991b1b;
            font-size: 0.88rem;
            margin: 4px 0;
        ">{line}</div>
        """, unsafe_allow_html=True)


# ============================================
# FLASH MESSAGES (survive one rerun)
# ============================================
def set_flash(message: str, kind: str = "success"):
    st.session_state.flash_message = {"message": message, "kind": kind}


def render_flash():
    """Show and clear the pending flash message, if any."""
    flash = st.session_state.get("flash_message")
    if not flash:
        return
    st.session_state.flash_message = None
    if flash["kind"] == "error":
        st.error(flash["message"])
    elif flash["kind"] == "warning":
        st.warning(flash["message"])
    else:
        st.success(flash["message"])
