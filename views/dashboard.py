"""Dashboard page — KPIs, breakdown charts, recent assets and warranty alerts."""

import pandas as pd
import streamlit as st

from components.charts import create_analytics_bar_chart, create_status_donut_chart, create_value_bar_chart
from components.empty_states import render_empty_state, render_success_state
from components.feedback import render_warranty_badge
from core.data import assets_to_dataframe
from services.dashboard_service import (
    calculate_dashboard_stats, sort_breakdown, get_recent_assets, get_removed_assets, format_currency,
)
from services.warranty_service import get_warranty_alerts, days_until_expiry
from views.context import AppContext


def _stat_card(label: str, value, variant: str = "info"):
    st.markdown(f"""
    <div class="stat-card {variant}">
        <div class="stat-label">{label}</div>
        <div class="stat-value">{value}</div>
    </div>
    """, unsafe_allow_html=True)


def _render_breakdown_table(title: str, rows: list, with_value: bool = False):
    st.markdown(f"**{title}**")
    if not rows:
        st.caption("No data")
        return
    df = pd.DataFrame(sort_breakdown(rows))
    df = df.rename(columns={"name": title.split(" by ")[-1], "count": "Assets", "value": "Value"})
    if with_value:
        df["Value"] = df["Value"].map(format_currency)
    st.dataframe(df, hide_index=True, use_container_width=True)


def _render_removed_assets(assets):
    removed = get_removed_assets(assets)
    with st.expander(f"Removed assets ({len(removed)})", expanded=False):
        if not removed:
            render_empty_state("no_removed_assets")
            return
        st.dataframe(
            pd.DataFrame([{
                "Asset Code": a.asset_code,
                "Type": a.asset_type,
                "Brand": f"{a.brand} {a.model}",
                "Removed On": a.removed_date,
                "Reason": a.removal_reason,
            } for a in removed]),
            hide_index=True,
            use_container_width=True,
        )


def _render_warranty_alerts(assets, today):
    st.markdown("**Warranty Alerts**")
    alerts = get_warranty_alerts(assets)
    if not alerts:
        render_success_state("All warranties healthy", "No expired or expiring warranties.")
        return
    for alert in alerts:
        asset = alert["asset"]
        days = days_until_expiry(asset.warranty_end_date, today)
        detail = f"expired {abs(days)} day(s) ago" if alert["alert_type"] == "expired" else f"expires in {days} day(s)"
        st.markdown(
            f"{render_warranty_badge(asset.warranty_status)} **{asset.asset_code}** "
            f"{asset.brand} {asset.model} · {detail}",
            unsafe_allow_html=True,
        )


def render(ctx: AppContext) -> None:
    """Render this page."""
    st.markdown("""
    <div class="page-header">
        <h1>Dashboard</h1>
        <p>Overview of your IT assets and key metrics</p>
    </div>
    """, unsafe_allow_html=True)

    assets = ctx.registry.list_assets()
    if not assets:
        render_empty_state("no_assets")
        return

    stats = calculate_dashboard_stats(assets)
    today = ctx.registry.today()

    # ========== KPI ROW ==========
    cards = [
        ("Total Assets", stats.total_assets, "info"),
        ("Active", stats.active_assets, "success"),
        ("Inactive", stats.inactive_assets, "danger"),
        ("Removed", stats.removed_assets, "info"),
        ("Under Warranty", stats.under_warranty, "success"),
        ("Expiring Soon", stats.expiring_warranty, "warning"),
        ("Requires Action", stats.requires_action, "danger"),
    ]
    for col, (label, value, variant) in zip(st.columns(len(cards)), cards):
        with col:
            _stat_card(label, value, variant)

    _render_removed_assets(assets)

    # ========== CHARTS ==========
    chart_col1, chart_col2 = st.columns(2)
    with chart_col1:
        st.markdown("**Assets by Type**")
        by_type = stats.assets_by_type
        if by_type:
            st.plotly_chart(
                create_analytics_bar_chart(
                    [r["name"] for r in by_type], [r["count"] for r in by_type],
                    "Asset Type", "Assets", total_for_percent=stats.total_assets,
                ),
                use_container_width=True,
            )
        else:
            st.caption("No data")
    with chart_col2:
        st.markdown("**Assets by Status**")
        st.plotly_chart(create_status_donut_chart(stats.assets_by_status), use_container_width=True)

    # ========== QUICK INSIGHTS ==========
    ownership = {r["name"]: r["count"] for r in stats.assets_by_ownership}
    q1, q2, q3, q4, q5, q6 = st.columns(6)
    q1.metric("Assigned", stats.assigned_assets)
    q2.metric("Unassigned", stats.unassigned_assets)
    q3.metric("Owned", ownership.get("Owned", 0))
    q4.metric("Leased", ownership.get("Leased", 0))
    q5.metric("Total Asset Value", format_currency(stats.total_asset_value))
    q6.metric("Total Depreciation", format_currency(stats.total_depreciation))

    value_col, dept_col, loc_col = st.columns(3)
    with value_col:
        st.markdown("**Value by Type**")
        if stats.assets_by_type:
            st.plotly_chart(create_value_bar_chart(stats.assets_by_type, height=260), use_container_width=True)
    with dept_col:
        _render_breakdown_table("Assets by Department", stats.assets_by_department, with_value=True)
    with loc_col:
        _render_breakdown_table("Assets by Location", stats.assets_by_location)

    # ========== RECENT + ALERTS ==========
    recent_col, alert_col = st.columns([2, 1])
    with recent_col:
        st.markdown("**Recent Assets**")
        st.dataframe(
            assets_to_dataframe(get_recent_assets(assets)).drop(columns=["id"]),
            hide_index=True,
            use_container_width=True,
        )
    with alert_col:
        _render_warranty_alerts(assets, today)
