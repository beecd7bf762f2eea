"""Settings page — dropdown taxonomy management and session activity log."""

import pandas as pd
import streamlit as st

from config.constants import DROPDOWN_CATEGORIES
from config.permissions import check_page_access, render_access_denied, get_permitted_actions
from components.confirmation import request_action_confirmation, render_confirmation_dialog, \
    clear_action_confirmation
from components.empty_states import render_empty_state
from components.feedback import render_inline_error, set_flash, render_flash
from core.errors import AssetTrackerError
from views.context import AppContext


def _section_header(title: str):
    st.markdown(f"""
    <div style="display: flex; align-items: center; gap: 8px; margin: 16px 0; padding-bottom: 8px; border-bottom: 2px solid #3b82f6;">
        <div style="width: 4px; height: 20px; background: #3b82f6; border-radius: 2px;"></div>
        <span style="font-size: 16px; font-weight: 600; color: #1f2937;">{title}</span>
    </div>
    """, unsafe_allow_html=True)


def _render_delete_confirmation(ctx: AppContext):
    confirmed, cancelled = render_confirmation_dialog("delete_option")
    if cancelled:
        st.rerun()
    if confirmed:
        action = st.session_state.pending_action
        clear_action_confirmation()
        try:
            ctx.taxonomy.delete_option(action["entity_id"], user_role=ctx.user_role)
        except AssetTrackerError as e:
            set_flash(e.message, "error")
        else:
            set_flash(f"Option '{action['entity_label']}' deleted")
        st.rerun()


def _render_category(ctx: AppContext, category: str, label: str):
    """Add form, option list and per-option edit/delete for one category."""
    with st.form(f"add_option_{category}", clear_on_submit=True):
        c1, c2 = st.columns([4, 1])
        value = c1.text_input(f"New {label[:-1] if label.endswith('s') else label}",
                              key=f"new_option_{category}")
        c2.markdown("<div style='height: 28px;'></div>", unsafe_allow_html=True)
        submitted = c2.form_submit_button("Add", type="primary", use_container_width=True)
    if submitted:
        try:
            option = ctx.taxonomy.add_option(category, value, user_role=ctx.user_role)
        except AssetTrackerError as e:
            render_inline_error(getattr(e, "errors", None) or [e.message])
        else:
            set_flash(f"Added '{option.value}' to {label}")
            st.rerun()

    options = ctx.taxonomy.get_options(category)
    if not options:
        render_empty_state("no_options")
        return

    assets = ctx.registry.list_assets()
    st.dataframe(
        pd.DataFrame([{
            "Value": o.value,
            "Used by assets": ctx.taxonomy.count_usage(o.id, assets),
        } for o in options]),
        hide_index=True,
        use_container_width=True,
    )

    by_id = {o.id: o for o in options}
    selected_id = st.selectbox("Select option", list(by_id), format_func=lambda oid: by_id[oid].value,
                               key=f"option_select_{category}")
    selected = by_id[selected_id]

    e1, e2, e3 = st.columns([3, 1, 1])
    new_value = e1.text_input("Rename to", value=selected.value, key=f"rename_{selected.id}")
    e2.markdown("<div style='height: 28px;'></div>", unsafe_allow_html=True)
    e3.markdown("<div style='height: 28px;'></div>", unsafe_allow_html=True)
    if e2.button("Save", key=f"save_option_{category}"):
        try:
            ctx.taxonomy.update_option(selected.id, new_value, user_role=ctx.user_role)
        except AssetTrackerError as e:
            render_inline_error(getattr(e, "errors", None) or [e.message])
        else:
            set_flash(f"Renamed to '{new_value.strip()}'")
            st.rerun()
    if e3.button("Delete", key=f"delete_option_{category}"):
        request_action_confirmation(
            "delete_option", selected.id, selected.value,
            {"Category": label, "Assets using this value": ctx.taxonomy.count_usage(selected.id, assets)},
        )
        st.rerun()


def _render_activity_log(ctx: AppContext):
    summary = ctx.audit.get_audit_summary()
    a1, a2, a3 = st.columns(3)
    a1.metric("Events", summary["total"])
    a2.metric("Critical", summary["critical"])
    a3.metric("Failed / Denied", summary["failed"])

    entries = ctx.audit.entries()
    if not entries:
        st.caption("No activity recorded yet")
        return
    st.dataframe(
        pd.DataFrame([{
            "Time": e["timestamp"][:19].replace("T", " "),
            "Action": e["action_type"],
            "Category": e["category"],
            "By": e["performed_by"],
            "Description": e["description"],
            "OK": "✓" if e["success"] else "✗",
        } for e in entries[:100]]),
        hide_index=True,
        use_container_width=True,
    )


def render(ctx: AppContext) -> None:
    """Render this page."""
    # Route-level access control
    if not check_page_access("Settings", ctx.user_role):
        render_access_denied(required_roles=["admin"])
        st.stop()

    st.markdown("""
    <div class="page-header">
        <h1>Settings</h1>
        <p>Dropdown values used across asset and employee forms</p>
    </div>
    """, unsafe_allow_html=True)

    render_flash()
    _render_delete_confirmation(ctx)

    _section_header("Dropdown Options")
    category = st.selectbox(
        "Category",
        list(DROPDOWN_CATEGORIES),
        format_func=lambda c: f"{DROPDOWN_CATEGORIES[c]} ({len(ctx.taxonomy.get_options(c))})",
        key="settings_category",
    )
    _render_category(ctx, category, DROPDOWN_CATEGORIES[category])

    _section_header("Activity Log")
    _render_activity_log(ctx)

    with st.expander("Your permitted actions", expanded=False):
        st.write(", ".join(get_permitted_actions(ctx.user_role)) or "None")
