"""
Session workspace, table frames and pagination.
One workspace per browser session owns the asset, employee and dropdown collections.
"""
import os
import logging

import pandas as pd
import streamlit as st

from config.constants import PAGINATION_CONFIG
from core.seed import seed_workspace
from services.asset_service import AssetRegistry
from services.audit_service import AuditTrail
from services.dropdown_service import DropdownTaxonomyStore
from services.employee_service import EmployeeDirectory

logger = logging.getLogger("AssetTracker")

SEED_DEMO_DATA = os.getenv("SEED_DEMO_DATA", "true").lower() == "true"


# ============================================
# WORKSPACE
# ============================================
class AssetWorkspace:
    """Wires the three collections together and shares one audit trail."""

    def __init__(self, seed: bool = False, today=None, now=None):
        self.audit = AuditTrail()
        self.taxonomy = DropdownTaxonomyStore(audit=self.audit)
        self.directory = EmployeeDirectory(taxonomy=self.taxonomy, audit=self.audit)
        self.registry = AssetRegistry(
            taxonomy=self.taxonomy,
            directory=self.directory,
            audit=self.audit,
            today=today,
            now=now,
        )
        # Referential guard on employee deletion reads the registry
        self.directory.asset_source = self.registry
        if seed:
            seed_workspace(self.taxonomy, self.directory, self.registry)


def get_workspace() -> AssetWorkspace:
    """Workspace for the current session, created (and optionally seeded) on first use."""
    if "workspace" not in st.session_state:
        st.session_state.workspace = AssetWorkspace(seed=SEED_DEMO_DATA)
        logger.info(f"Workspace created (seeded={SEED_DEMO_DATA})")
    workspace = st.session_state.workspace
    # Warranty status depends on the day, so re-derive once per session start
    if not st.session_state.get("warranty_refreshed"):
        workspace.registry.refresh_warranty_statuses()
        st.session_state.warranty_refreshed = True
    return workspace


# ============================================
# TABLE FRAMES
# ============================================
ASSET_TABLE_COLUMNS = {
    "asset_code": "Asset Code",
    "asset_type": "Type",
    "brand": "Brand",
    "model": "Model",
    "status": "Status",
    "employee_name": "Assigned To",
    "department": "Department",
    "warranty_status": "Warranty",
}

EMPLOYEE_TABLE_COLUMNS = {
    "emp_no": "Emp No",
    "display_name": "Name",
    "email": "Email",
    "employee_type": "Type",
    "department": "Department",
    "sub_function": "Sub-Function",
}


def _records_frame(records, columns: dict) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=["id"] + list(columns.values()))
    df = pd.DataFrame([r.to_dict() for r in records])
    df = df[["id"] + list(columns.keys())].rename(columns=columns)
    return df.fillna("")


def assets_to_dataframe(assets) -> pd.DataFrame:
    return _records_frame(list(assets), ASSET_TABLE_COLUMNS)


def employees_to_dataframe(employees) -> pd.DataFrame:
    return _records_frame(list(employees), EMPLOYEE_TABLE_COLUMNS)


# ============================================
# PAGINATION
# ============================================
def get_pagination_state(key: str) -> dict:
    """Get or initialize pagination state for a specific table."""
    state_key = f"pagination_{key}"
    if state_key not in st.session_state:
        st.session_state[state_key] = {
            "page": 0,
            "page_size": PAGINATION_CONFIG["default_page_size"],
            "total_records": 0,
            "total_pages": 0
        }
    return st.session_state[state_key]


def paginate_dataframe(df: pd.DataFrame, key: str, show_controls: bool = True) -> pd.DataFrame:
    """
    Slice a DataFrame to the current page.

    Args:
        df: DataFrame to paginate
        key: Unique key for this table's pagination state
        show_controls: Whether to show the page size selector

    Returns:
        Paginated DataFrame slice
    """
    if df.empty:
        return df

    total_records = len(df)
    state = get_pagination_state(key)
    state["total_records"] = total_records

    if show_controls and total_records > PAGINATION_CONFIG["page_size_options"][0]:
        options = PAGINATION_CONFIG["page_size_options"]
        new_size = st.selectbox(
            "Rows per page",
            options=options,
            index=options.index(state["page_size"]) if state["page_size"] in options else 1,
            key=f"page_size_{key}",
        )
        if new_size != state["page_size"]:
            state["page_size"] = new_size
            state["page"] = 0

    page_size = state["page_size"]
    state["total_pages"] = max(1, (total_records + page_size - 1) // page_size)
    if state["page"] >= state["total_pages"]:
        state["page"] = state["total_pages"] - 1

    start_idx = state["page"] * page_size
    return df.iloc[start_idx:start_idx + page_size]


def render_page_navigation(key: str):
    """Prev / Next buttons below the table."""
    state = get_pagination_state(key)
    total_pages = state.get("total_pages", 1)
    current_page = state.get("page", 0)

    if total_pages <= 1:
        return

    def go_to_page(page_num):
        get_pagination_state(key)["page"] = page_num

    col1, col2, col3 = st.columns([1, 2, 1])
    with col1:
        st.button(
            "◀ Prev",
            key=f"pg_prev_{key}",
            on_click=go_to_page,
            args=(max(0, current_page - 1),),
            disabled=(current_page == 0),
        )
    with col2:
        start = current_page * state["page_size"] + 1
        end = min((current_page + 1) * state["page_size"], state["total_records"])
        st.caption(f"Showing {start}-{end} of {state['total_records']} · Page {current_page + 1} of {total_pages}")
    with col3:
        st.button(
            "Next ▶",
            key=f"pg_next_{key}",
            on_click=go_to_page,
            args=(min(total_pages - 1, current_page + 1),),
            disabled=(current_page >= total_pages - 1),
        )
