"""
Dashboard analytics — aggregate statistics over the asset collection.
Read-only: nothing here mutates an asset.

Removed assets are excluded from every figure except the status
breakdown and the removed count.
"""

import pandas as pd

from core.models import DashboardStats


def _money(frame: pd.DataFrame, column: str) -> pd.Series:
    return pd.to_numeric(frame[column], errors="coerce").fillna(0)


def _present(frame: pd.DataFrame, column: str) -> pd.Series:
    return frame[column].fillna("").astype(str).str.strip() != ""


def _breakdown(frame: pd.DataFrame, column: str, with_value: bool = False) -> list:
    """Group counts in first-occurrence order."""
    if frame.empty:
        return []
    grouped = frame.assign(_value=_money(frame, "current_value")).groupby(column, sort=False)
    counts = grouped.size()
    values = grouped["_value"].sum()
    rows = []
    for name, count in counts.items():
        row = {"name": name, "count": int(count)}
        if with_value:
            row["value"] = float(values[name])
        rows.append(row)
    return rows


def calculate_dashboard_stats(assets) -> DashboardStats:
    """
    Compute every dashboard figure from the current assets.

    Args:
        assets: iterable of Asset

    Returns:
        DashboardStats; all zeros and empty breakdowns for no assets
    """
    stats = DashboardStats()
    assets = list(assets)
    if not assets:
        return stats

    df = pd.DataFrame([a.to_dict() for a in assets])
    stats.assets_by_status = _breakdown(df, "status")
    stats.removed_assets = int((df["status"] == "Removed").sum())

    live = df[df["status"] != "Removed"]
    if live.empty:
        return stats

    stats.total_assets = len(live)
    stats.active_assets = int((live["status"] == "Active").sum())
    stats.inactive_assets = int((live["status"] == "Inactive").sum())
    stats.reserved_assets = int((live["status"] == "Reserved").sum())

    stats.assets_by_type = _breakdown(live, "asset_type", with_value=True)
    stats.assets_by_department = _breakdown(live, "department", with_value=True)
    stats.assets_by_ownership = _breakdown(live, "ownership")
    stats.assets_by_location = _breakdown(live, "primary_location")

    stats.total_asset_value = float(_money(live, "current_value").sum())
    stats.total_purchase_value = float(_money(live, "purchase_price").sum())
    stats.total_depreciation = stats.total_purchase_value - stats.total_asset_value

    assigned = _present(live, "employee_id")
    stats.assigned_assets = int(assigned.sum())
    stats.unassigned_assets = int((~assigned).sum())

    stats.under_warranty = int((live["warranty_status"] == "Active").sum())
    stats.expired_warranty = int((live["warranty_status"] == "Expired").sum())
    stats.expiring_warranty = int((live["warranty_status"] == "Expiring Soon").sum())
    stats.requires_action = int(_present(live, "action").sum())
    return stats


def sort_breakdown(rows: list) -> list:
    """Descending by count, for display."""
    return sorted(rows, key=lambda r: r["count"], reverse=True)


def get_recent_assets(assets, limit: int = 5) -> list:
    return [a for a in assets if not a.is_removed][:limit]


def get_removed_assets(assets) -> list:
    return [a for a in assets if a.is_removed]


def format_currency(value) -> str:
    """Compact rupee figure: lakhs above 1,00,000, thousands above 1,000."""
    value = value or 0
    sign = "-" if value < 0 else ""
    value = abs(value)
    if value >= 100000:
        return f"{sign}₹{value / 100000:.2f}L"
    if value >= 1000:
        return f"{sign}₹{value / 1000:.1f}K"
    return f"{sign}₹{value:g}"
