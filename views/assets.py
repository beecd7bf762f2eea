"""Assets page — searchable register, 5-step asset wizard, assignment, removal and deletion."""

import logging

import streamlit as st

from config.constants import ASSET_TYPES, EDITABLE_STATUSES, ASSET_STATUSES, OWNERSHIP_TYPES, \
    WARRANTY_TYPES, WARRANTY_STATUSES
from config.permissions import can_edit_assets, can_delete_assets, validate_action
from components.confirmation import (
    request_action_confirmation, render_confirmation_dialog, clear_action_confirmation,
)
from components.empty_states import render_empty_state
from components.feedback import render_inline_error, set_flash, render_flash, render_status_badge, \
    render_warranty_badge
from core.data import assets_to_dataframe, paginate_dataframe, render_page_navigation
from core.errors import AssetTrackerError, ConflictError
from services.asset_service import ASSET_FORM_STEPS, validate_step, ensure_editable
from services.export_service import assets_to_csv, export_assets_to_excel, export_filename
from views.context import AppContext

logger = logging.getLogger("AssetTracker")

FORM_PREFIX = "asset_form_"

# Field -> (label, widget kind, option source, optional)
# Option source: a list, a taxonomy category name, or None for free text
FORM_FIELDS = {
    "asset_code": ("Asset Code *", "text", None, False),
    "asset_type": ("Asset Type *", "select", ASSET_TYPES, False),
    "department": ("Department *", "select", "department", False),
    "status": ("Status *", "select", EDITABLE_STATUSES, False),
    "action": ("Action Required", "select", "action", True),
    "brand": ("Brand *", "select", "brand", False),
    "model": ("Model *", "text", None, False),
    "serial_no": ("Serial Number *", "text", None, False),
    "host_name": ("Host Name *", "text", None, False),
    "brief_config": ("Brief Configuration *", "area", None, False),
    "ownership": ("Ownership Type *", "select", OWNERSHIP_TYPES, False),
    "purchase_vendor": ("Purchase Vendor *", "select", "purchaseVendor", False),
    "date_of_purchase": ("Date of Purchase *", "date", None, False),
    "purchase_price": ("Purchase Price (₹)", "number", None, True),
    "current_value": ("Current Value (₹)", "number", None, True),
    "depreciation_rate": ("Depreciation Rate (%)", "number", None, True),
    "lease_contract_code": ("Lease Contract Code *", "text", None, True),
    "warranty_type": ("Warranty Type *", "select", WARRANTY_TYPES, False),
    "warranty_end_date": ("Warranty End Date *", "date", None, False),
    "amc_start_date": ("AMC Start Date", "date", None, True),
    "amc_end_date": ("AMC End Date", "date", None, True),
    "primary_location": ("Primary Location *", "select", "location", False),
    "user_department": ("User Department *", "select", "department", False),
    "sub_function": ("Sub-Function", "select", "subFunction", True),
    "assigned_date": ("Assigned Date", "date", None, True),
    "physically_verified": ("Physically Verified", "date", None, True),
    "asset_remark": ("Asset Remarks", "area", None, True),
}

# Fields shown per wizard step (superset of the fields each step gates)
STEP_LAYOUT = {
    "basic": ["asset_code", "asset_type", "department", "status", "action"],
    "hardware": ["brand", "model", "serial_no", "host_name", "brief_config"],
    "purchase": ["ownership", "purchase_vendor", "date_of_purchase", "lease_contract_code",
                 "purchase_price", "current_value", "depreciation_rate"],
    "warranty": ["warranty_type", "warranty_end_date", "amc_start_date", "amc_end_date"],
    "assignment": ["employee_id", "primary_location", "user_department", "sub_function",
                   "assigned_date", "physically_verified", "asset_remark"],
}


# ============================================
# FORM WIDGETS
# ============================================
def _options_for(ctx: AppContext, source) -> list:
    if source is None:
        return []
    if isinstance(source, list):
        return list(source)
    return ctx.taxonomy.get_values(source)


def _form_widget(ctx: AppContext, field: str, form: dict, container=st):
    """Render one form field and write its value back into ``form``."""
    label, kind, source, optional = FORM_FIELDS[field]
    key = f"{FORM_PREFIX}{field}"
    current = form.get(field)

    options = _options_for(ctx, source)
    if kind == "select" and not options:
        kind = "text"

    if kind == "select":
        if optional:
            options = [""] + options
        if current and current not in options:
            options.append(current)
        if st.session_state.get(key) not in options:
            st.session_state[key] = current if current in options else options[0]
        value = container.selectbox(label, options, key=key)
    elif kind == "date":
        if key not in st.session_state:
            st.session_state[key] = current
        value = container.date_input(label, key=key, format="YYYY-MM-DD")
    elif kind == "number":
        if key not in st.session_state:
            st.session_state[key] = float(current) if current is not None else None
        value = container.number_input(label, min_value=0.0, key=key)
    elif kind == "area":
        if key not in st.session_state:
            st.session_state[key] = current or ""
        value = container.text_area(label, key=key, height=80)
    else:
        if key not in st.session_state:
            st.session_state[key] = current or ""
        value = container.text_input(label, key=key)

    form[field] = None if value == "" else value
    return value


def _employee_widget(ctx: AppContext, form: dict):
    """Holder select. Picking someone new copies their department and sub-function."""
    employees = ctx.directory.list_employees()
    labels = {e.id: f"{e.display_name} ({e.emp_no})" for e in employees}
    options = [""] + list(labels)
    key = f"{FORM_PREFIX}employee_id"
    current = form.get("employee_id") or ""
    if st.session_state.get(key) not in options:
        st.session_state[key] = current if current in options else ""

    selected = st.selectbox(
        "Assign to Employee", options, key=key,
        format_func=lambda eid: labels.get(eid, "Unassigned"),
    )
    if selected and selected != current:
        employee = ctx.directory.get(selected)
        for field, value in (("user_department", employee.department), ("sub_function", employee.sub_function)):
            if value:
                form[field] = value
                st.session_state[f"{FORM_PREFIX}{field}"] = value
    form["employee_id"] = selected or None


def _clear_form_state():
    for key in [k for k in st.session_state.keys() if str(k).startswith(FORM_PREFIX)]:
        del st.session_state[key]
    st.session_state.asset_wizard = None


def _start_wizard(mode: str, asset=None):
    _clear_form_state()
    form = asset.to_dict() if asset else {"status": "Active", "ownership": "Owned", "warranty_type": "Warranty"}
    st.session_state.asset_wizard = {
        "mode": mode,
        "asset_id": asset.id if asset else None,
        "step": 0,
        "form": form,
        "errors": [],
    }


# ============================================
# WIZARD
# ============================================
def _render_step_indicator(current: int):
    parts = []
    for index, step in enumerate(ASSET_FORM_STEPS):
        css = "done" if index < current else "current" if index == current else ""
        parts.append(f'<div class="wizard-step {css}">{index + 1}. {step["title"]}</div>')
    st.markdown(f'<div class="wizard-steps">{"".join(parts)}</div>', unsafe_allow_html=True)


def _save_wizard(ctx: AppContext, wizard: dict):
    form = wizard["form"]
    role = ctx.user_role
    if wizard["mode"] == "create":
        asset = ctx.registry.create(form, user_role=role)
        return f"Asset {asset.asset_code} created"

    asset = ctx.registry.get(wizard["asset_id"])
    ensure_editable(asset)
    changes = {k: v for k, v in form.items() if k != "employee_id"}
    asset = ctx.registry.update(asset.id, changes, user_role=role)
    if (form.get("employee_id") or None) != asset.employee_id:
        ctx.registry.assign(asset.id, form.get("employee_id"), user_role=role)
    return f"Asset {asset.asset_code} updated"


def _render_wizard(ctx: AppContext):
    wizard = st.session_state.asset_wizard
    step_index = wizard["step"]
    step = ASSET_FORM_STEPS[step_index]
    form = wizard["form"]
    title = "Add New Asset" if wizard["mode"] == "create" else f"Edit Asset {form.get('asset_code', '')}"

    with st.container(border=True):
        st.subheader(title)
        _render_step_indicator(step_index)

        fields = STEP_LAYOUT[step["key"]]
        col1, col2 = st.columns(2)
        for position, field in enumerate(fields):
            if field == "employee_id":
                _employee_widget(ctx, form)
                continue
            if field == "lease_contract_code" and form.get("ownership") != "Leased":
                continue
            if field in ("amc_start_date", "amc_end_date") and form.get("warranty_type") != "AMC":
                continue
            _form_widget(ctx, field, form, col1 if position % 2 == 0 else col2)

        if wizard["errors"]:
            render_inline_error(wizard["errors"])

        is_last = step_index == len(ASSET_FORM_STEPS) - 1
        b1, b2, b3 = st.columns([1, 1, 3])
        with b1:
            if st.button("Cancel", key="wizard_cancel"):
                _clear_form_state()
                st.rerun()
        with b2:
            if step_index > 0 and st.button("◀ Back", key="wizard_back"):
                wizard["step"] -= 1
                wizard["errors"] = []
                st.rerun()
        with b3:
            if st.button("Save Asset" if is_last else "Next ▶", key="wizard_next", type="primary"):
                errors = validate_step(step_index, form, today=ctx.registry.today())
                if errors:
                    wizard["errors"] = errors
                    st.rerun()
                wizard["errors"] = []
                if not is_last:
                    wizard["step"] += 1
                    st.rerun()
                try:
                    message = _save_wizard(ctx, wizard)
                except AssetTrackerError as e:
                    logger.warning(f"Asset form save rejected: {e}")
                    wizard["errors"] = getattr(e, "errors", None) or [e.message]
                    st.rerun()
                _clear_form_state()
                set_flash(message)
                st.rerun()


# ============================================
# DETAIL PANELS
# ============================================
def _render_view(asset):
    with st.container(border=True):
        st.subheader(f"{asset.asset_code} · {asset.brand} {asset.model}")
        st.markdown(
            f"{render_status_badge(asset.status)} {render_warranty_badge(asset.warranty_status)}",
            unsafe_allow_html=True,
        )
        sections = {
            "Basic": [("Type", asset.asset_type), ("Department", asset.department),
                      ("Action", asset.action), ("S.No", asset.s_no)],
            "Hardware": [("Serial No", asset.serial_no), ("Host Name", asset.host_name),
                         ("Configuration", asset.brief_config)],
            "Purchase": [("Ownership", asset.ownership), ("Vendor", asset.purchase_vendor),
                         ("Purchased", asset.date_of_purchase), ("Price", asset.purchase_price),
                         ("Current Value", asset.current_value), ("Depreciation %", asset.depreciation_rate),
                         ("Lease Contract", asset.lease_contract_code)],
            "Warranty": [("Type", asset.warranty_type), ("Ends", asset.warranty_end_date),
                         ("AMC Start", asset.amc_start_date), ("AMC End", asset.amc_end_date)],
            "Assignment": [("Employee", asset.employee_name), ("Email", asset.employee_email),
                           ("Employee Type", asset.employee_type), ("Location", asset.primary_location),
                           ("User Department", asset.user_department), ("Sub-Function", asset.sub_function),
                           ("Assigned", asset.assigned_date), ("Verified", asset.physically_verified),
                           ("Remarks", asset.asset_remark)],
        }
        if asset.is_removed:
            sections["Removal"] = [("Removed On", asset.removed_date), ("Reason", asset.removal_reason)]

        columns = st.columns(3)
        for index, (title, rows) in enumerate(sections.items()):
            with columns[index % 3]:
                st.markdown(f"**{title}**")
                for label, value in rows:
                    if value not in (None, ""):
                        st.caption(f"{label}: {value}")
        st.caption(f"Created {asset.created_at:%Y-%m-%d %H:%M} · Updated {asset.updated_at:%Y-%m-%d %H:%M}")
        if st.button("Close", key="view_close"):
            st.session_state.asset_panel = None
            st.rerun()


def _select_or_blank(label, options, current, key):
    options = [""] + [o for o in options if o]
    if current and current not in options:
        options.append(current)
    return st.selectbox(label, options, index=options.index(current) if current in options else 0, key=key)


def _render_assign(ctx: AppContext, asset):
    employees = ctx.directory.list_employees()
    labels = {e.id: f"{e.display_name} ({e.emp_no})" for e in employees}
    options = [""] + list(labels)

    with st.container(border=True):
        st.subheader(f"Assign {asset.asset_code}")
        with st.form("assign_asset_form"):
            employee_id = st.selectbox(
                "Assign to Employee", options,
                index=options.index(asset.employee_id) if asset.employee_id in options else 0,
                format_func=lambda eid: labels.get(eid, "Unassigned"),
            )
            c1, c2 = st.columns(2)
            with c1:
                location = _select_or_blank("Primary Location", ctx.taxonomy.get_values("location"),
                                            asset.primary_location, "assign_location")
                sub_function = _select_or_blank("Sub-Function (blank = employee's)",
                                                ctx.taxonomy.get_values("subFunction"), None, "assign_sub_function")
                assigned_date = st.date_input("Assigned Date", value=asset.assigned_date, format="YYYY-MM-DD")
            with c2:
                department = _select_or_blank("User Department (blank = employee's)",
                                              ctx.taxonomy.get_values("department"), None, "assign_department")
                verified = st.date_input("Physically Verified", value=asset.physically_verified, format="YYYY-MM-DD")
            remark = st.text_area("Asset Remarks", value=asset.asset_remark or "", placeholder="Any additional notes...")

            submitted = st.form_submit_button("Save Assignment", type="primary")

        if submitted:
            fields = {
                "primary_location": location,
                "sub_function": sub_function,
                "assigned_date": assigned_date,
                "physically_verified": verified,
                "asset_remark": remark,
            }
            if department or not employee_id:
                fields["user_department"] = department
            try:
                updated = ctx.registry.assign(asset.id, employee_id or None, user_role=ctx.user_role, **fields)
            except AssetTrackerError as e:
                render_inline_error(getattr(e, "errors", None) or [e.message])
            else:
                st.session_state.asset_panel = None
                holder = updated.employee_name or "nobody"
                set_flash(f"{updated.asset_code} is now assigned to {holder}")
                st.rerun()
        if st.button("Cancel", key="assign_cancel"):
            st.session_state.asset_panel = None
            st.rerun()


def _render_remove(ctx: AppContext, asset):
    with st.container(border=True):
        st.subheader(f"Remove {asset.asset_code}")
        st.caption("The asset is kept for history with status Removed. A reason is required.")
        with st.form("remove_asset_form"):
            reason = st.text_area(
                "Reason for removal *",
                placeholder="e.g., Asset disposed, sold, lost, damaged beyond repair...",
            )
            submitted = st.form_submit_button("Remove Asset", type="primary")
        if submitted:
            try:
                ctx.registry.remove(asset.id, reason, user_role=ctx.user_role)
            except AssetTrackerError as e:
                render_inline_error(e.message)
            else:
                st.session_state.asset_panel = None
                set_flash(f"Asset {asset.asset_code} removed")
                st.rerun()
        if st.button("Cancel", key="remove_cancel"):
            st.session_state.asset_panel = None
            st.rerun()


def _render_delete_confirmation(ctx: AppContext):
    confirmed, cancelled = render_confirmation_dialog("delete_asset")
    if cancelled:
        st.rerun()
    if confirmed:
        action = st.session_state.pending_action
        clear_action_confirmation()
        try:
            ctx.registry.delete(action["entity_id"], user_role=ctx.user_role)
        except AssetTrackerError as e:
            set_flash(e.message, "error")
        else:
            set_flash(f"Asset {action['entity_label']} permanently deleted")
        st.rerun()


def _release_holder(ctx: AppContext, asset):
    """Removed assets cannot be reassigned, but their holder can be cleared."""
    try:
        ctx.registry.assign(asset.id, None, user_role=ctx.user_role)
    except AssetTrackerError as e:
        set_flash(e.message, "error")
    else:
        set_flash(f"{asset.asset_code} released from its holder")
    st.rerun()


# ============================================
# PAGE
# ============================================
def _open_panel(ctx: AppContext, kind: str, asset):
    if kind in ("edit", "assign"):
        try:
            ensure_editable(asset)
        except ConflictError as e:
            st.error(e.message)
            return
    if kind == "edit":
        st.session_state.asset_panel = None
        _start_wizard("edit", asset)
    else:
        st.session_state.asset_panel = {"kind": kind, "asset_id": asset.id}
    st.rerun()


def _render_export(ctx: AppContext, assets):
    if not validate_action("export_data", ctx.user_role):
        return
    c1, c2 = st.columns(2)
    with c1:
        st.download_button(
            "Export CSV",
            data=assets_to_csv(assets),
            file_name=export_filename("assets", ctx.registry.today()),
            mime="text/csv",
            key="assets_export_csv",
        )
    with c2:
        st.download_button(
            "Export Excel",
            data=export_assets_to_excel(assets),
            file_name=export_filename("assets", ctx.registry.today()).replace(".csv", ".xlsx"),
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            key="assets_export_xlsx",
        )


def render(ctx: AppContext) -> None:
    """Render this page."""
    can_edit = can_edit_assets(ctx.user_role)
    can_delete = can_delete_assets(ctx.user_role)
    st.session_state.setdefault("asset_wizard", None)
    st.session_state.setdefault("asset_panel", None)

    header_col, action_col = st.columns([3, 2])
    with header_col:
        st.markdown("""
        <div class="page-header">
            <h1>Assets</h1>
            <p>Manage and track all IT assets</p>
        </div>
        """, unsafe_allow_html=True)

    render_flash()

    # ========== FILTERS ==========
    f1, f2, f3, f4 = st.columns([3, 1, 1, 1])
    search = f1.text_input("Search", placeholder="Asset code, brand, model, employee, department...",
                           key="asset_search")
    status = f2.selectbox("Status", ["All"] + ASSET_STATUSES, key="asset_status_filter")
    asset_type = f3.selectbox("Type", ["All"] + ASSET_TYPES, key="asset_type_filter")
    warranty = f4.selectbox("Warranty", ["All"] + WARRANTY_STATUSES, key="asset_warranty_filter")

    filtered = ctx.registry.filter_assets(search, status, asset_type, warranty)

    with action_col:
        _render_export(ctx, filtered)
        if can_edit and st.button("＋ Add Asset", key="add_asset_btn", type="primary"):
            st.session_state.asset_panel = None
            _start_wizard("create")
            st.rerun()

    if st.session_state.asset_wizard:
        if can_edit:
            _render_wizard(ctx)
        else:
            _clear_form_state()

    panel = st.session_state.asset_panel
    if panel:
        try:
            asset = ctx.registry.get(panel["asset_id"])
        except AssetTrackerError:
            st.session_state.asset_panel = None
        else:
            if panel["kind"] == "view":
                _render_view(asset)
            elif panel["kind"] == "assign" and can_edit:
                _render_assign(ctx, asset)
            elif panel["kind"] == "remove" and can_edit:
                _render_remove(ctx, asset)

    if can_delete:
        _render_delete_confirmation(ctx)

    # ========== TABLE ==========
    if not ctx.registry.list_assets():
        render_empty_state("no_assets")
        return
    if not filtered:
        render_empty_state("no_matching_assets")
        return

    st.caption(f"{len(filtered)} asset(s)")
    df = assets_to_dataframe(filtered)
    page_df = paginate_dataframe(df, "assets")
    st.dataframe(page_df.drop(columns=["id"]), hide_index=True, use_container_width=True)
    render_page_navigation("assets")

    # ========== ROW ACTIONS ==========
    by_id = {a.id: a for a in filtered}
    selected_id = st.selectbox(
        "Select an asset",
        list(by_id),
        format_func=lambda aid: f"{by_id[aid].asset_code} · {by_id[aid].brand} {by_id[aid].model} ({by_id[aid].status})",
        key="asset_row_select",
    )
    selected = by_id[selected_id]

    buttons = [("View", "view")]
    if can_edit and not selected.is_removed:
        buttons += [("Edit", "edit"), ("Assign", "assign"), ("Remove", "remove")]
    elif can_edit and selected.employee_id:
        buttons.append(("Release Holder", "release"))
    if can_delete:
        buttons.append(("Delete", "delete"))

    for col, (label, kind) in zip(st.columns(len(buttons)), buttons):
        with col:
            if st.button(label, key=f"asset_action_{kind}"):
                if kind == "delete":
                    request_action_confirmation(
                        "delete_asset", selected.id, selected.asset_code,
                        {"Type": selected.asset_type, "Model": f"{selected.brand} {selected.model}"},
                    )
                    st.rerun()
                elif kind == "release":
                    _release_holder(ctx, selected)
                else:
                    _open_panel(ctx, kind, selected)
