"""Employees page — directory with search, add/edit form and guarded deletion."""

import streamlit as st

from config.constants import EMPLOYEE_TYPES
from config.permissions import can_edit_employees, can_delete_employees, validate_action
from components.confirmation import request_action_confirmation, render_confirmation_dialog, \
    clear_action_confirmation
from components.empty_states import render_empty_state
from components.feedback import render_inline_error, set_flash, render_flash
from core.data import employees_to_dataframe, paginate_dataframe, render_page_navigation
from core.errors import AssetTrackerError
from services.export_service import employees_to_csv, export_filename
from views.context import AppContext


def _stat(col, label, value):
    col.markdown(f"""
    <div class="stat-card info">
        <div class="stat-label">{label}</div>
        <div class="stat-value">{value}</div>
    </div>
    """, unsafe_allow_html=True)


def _taxonomy_input(ctx: AppContext, label: str, category: str, current, key: str, optional: bool = False):
    """Select from the category's options, or free text while the category is empty."""
    values = ctx.taxonomy.get_values(category)
    if not values:
        return st.text_input(label, value=current or "", key=key)
    options = ([""] if optional else []) + values
    if current and current not in options:
        options.append(current)
    index = options.index(current) if current in options else 0
    return st.selectbox(label, options, index=index, key=key)


def _render_employee_form(ctx: AppContext):
    """Add or edit, depending on ``employee_form['employee_id']``."""
    state = st.session_state.employee_form
    employee = ctx.directory.get(state["employee_id"]) if state.get("employee_id") else None
    prefix = f"emp_{employee.id if employee else 'new'}"

    with st.container(border=True):
        st.subheader(f"Edit {employee.display_name}" if employee else "Add Employee")
        with st.form("employee_form"):
            c1, c2 = st.columns(2)
            with c1:
                emp_no = st.text_input("Employee No *", value=employee.emp_no if employee else "",
                                       key=f"{prefix}_emp_no")
                email = st.text_input("Email *", value=employee.email if employee else "",
                                      key=f"{prefix}_email")
                department = _taxonomy_input(ctx, "Department *", "department",
                                             employee.department if employee else None, f"{prefix}_department")
            with c2:
                name = st.text_input("Name *", value=employee.display_name if employee else "",
                                     key=f"{prefix}_name")
                current_type = employee.employee_type if employee else EMPLOYEE_TYPES[0]
                employee_type = st.selectbox("Employee Type *", EMPLOYEE_TYPES,
                                             index=EMPLOYEE_TYPES.index(current_type), key=f"{prefix}_type")
                sub_function = _taxonomy_input(ctx, "Sub-Function", "subFunction",
                                               employee.sub_function if employee else None,
                                               f"{prefix}_sub_function", optional=True)
            submitted = st.form_submit_button("Save Employee", type="primary")

        if submitted:
            data = {
                "emp_no": emp_no,
                "display_name": name,
                "email": email,
                "employee_type": employee_type,
                "department": department,
                "sub_function": sub_function,
            }
            try:
                if employee:
                    saved = ctx.directory.update(employee.id, data, user_role=ctx.user_role)
                else:
                    saved = ctx.directory.create(data, user_role=ctx.user_role)
            except AssetTrackerError as e:
                render_inline_error(getattr(e, "errors", None) or [e.message])
            else:
                st.session_state.employee_form = None
                set_flash(f"Employee {saved.display_name} saved")
                st.rerun()

        if st.button("Cancel", key="employee_form_cancel"):
            st.session_state.employee_form = None
            st.rerun()


def _render_delete_confirmation(ctx: AppContext):
    confirmed, cancelled = render_confirmation_dialog("delete_employee")
    if cancelled:
        st.rerun()
    if confirmed:
        action = st.session_state.pending_action
        clear_action_confirmation()
        try:
            ctx.directory.delete(action["entity_id"], user_role=ctx.user_role)
        except AssetTrackerError as e:
            set_flash(e.message, "error")
        else:
            set_flash(f"Employee {action['entity_label']} deleted")
        st.rerun()


def render(ctx: AppContext) -> None:
    """Render this page."""
    can_edit = can_edit_employees(ctx.user_role)
    can_delete = can_delete_employees(ctx.user_role)
    st.session_state.setdefault("employee_form", None)

    header_col, action_col = st.columns([3, 1])
    with header_col:
        st.markdown("""
        <div class="page-header">
            <h1>Employees</h1>
            <p>People who can be assigned assets</p>
        </div>
        """, unsafe_allow_html=True)

    render_flash()

    stats = ctx.directory.get_employee_stats()
    s1, s2, s3 = st.columns(3)
    _stat(s1, "Total Employees", stats["total"])
    _stat(s2, "Permanent", stats["permanent"])
    _stat(s3, "Contractual", stats["contractual"])

    f1, f2, f3 = st.columns([3, 1, 1])
    search = f1.text_input("Search", placeholder="Emp no, name, email, department...", key="employee_search")
    department = f2.selectbox("Department", ["All"] + ctx.directory.get_departments(), key="employee_dept_filter")
    employee_type = f3.selectbox("Type", ["All"] + EMPLOYEE_TYPES, key="employee_type_filter")

    filtered = ctx.directory.filter_employees(search, department, employee_type)

    with action_col:
        if validate_action("export_data", ctx.user_role):
            st.download_button(
                "Export CSV",
                data=employees_to_csv(filtered),
                file_name=export_filename("employees", ctx.registry.today()),
                mime="text/csv",
                key="employees_export_csv",
            )
        if can_edit and st.button("＋ Add Employee", key="add_employee_btn", type="primary"):
            st.session_state.employee_form = {"employee_id": None}
            st.rerun()

    if st.session_state.employee_form and can_edit:
        _render_employee_form(ctx)

    if can_delete:
        _render_delete_confirmation(ctx)

    if stats["total"] == 0:
        render_empty_state("no_employees")
        return
    if not filtered:
        render_empty_state("no_matching_employees")
        return

    df = employees_to_dataframe(filtered)
    st.dataframe(paginate_dataframe(df, "employees").drop(columns=["id"]), hide_index=True,
                 use_container_width=True)
    render_page_navigation("employees")

    by_id = {e.id: e for e in filtered}
    selected_id = st.selectbox(
        "Select an employee",
        list(by_id),
        format_func=lambda eid: f"{by_id[eid].display_name} ({by_id[eid].emp_no})",
        key="employee_row_select",
    )
    selected = by_id[selected_id]

    held = ctx.registry.assets_for_employee(selected.id)
    if held:
        st.caption("Holds: " + ", ".join(a.asset_code for a in held))
    else:
        st.caption("Holds no assets")

    col1, col2, _ = st.columns([1, 1, 4])
    with col1:
        if can_edit and st.button("Edit", key="employee_edit_btn"):
            st.session_state.employee_form = {"employee_id": selected.id}
            st.rerun()
    with col2:
        if can_delete and st.button("Delete", key="employee_delete_btn"):
            request_action_confirmation(
                "delete_employee", selected.id, selected.display_name,
                {"Emp No": selected.emp_no, "Assets held": len(held)},
            )
            st.rerun()
