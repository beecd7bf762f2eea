import pytest

from services.dashboard_service import (
    calculate_dashboard_stats, sort_breakdown, get_recent_assets, get_removed_assets, format_currency,
)


def test_empty_collection_gives_zeros():
    stats = calculate_dashboard_stats([])
    assert stats.total_assets == 0
    assert stats.total_asset_value == 0
    assert stats.assets_by_type == []


def test_single_asset_value_and_depreciation(workspace, asset_data):
    workspace.registry.create(asset_data(purchase_price=95000, current_value=76000))
    stats = calculate_dashboard_stats(workspace.registry.list_assets())
    assert stats.total_asset_value == 76000
    assert stats.total_depreciation == 19000
    assert stats.unassigned_assets == 1


def test_removed_asset_excluded_from_totals(workspace, asset_data):
    registry = workspace.registry
    registry.create(asset_data(purchase_price=95000, current_value=76000))
    old = registry.create(asset_data(asset_code="LPT-200", purchase_price=65000, current_value=13000))
    registry.remove(old.id, "Damaged beyond repair")

    stats = calculate_dashboard_stats(registry.list_assets())
    assert stats.total_asset_value == 76000
    assert stats.total_depreciation == 19000
    assert stats.removed_assets == 1


def test_seeded_figures(seeded):
    stats = calculate_dashboard_stats(seeded.registry.list_assets())
    assert stats.total_assets == 8
    assert (stats.active_assets, stats.inactive_assets, stats.reserved_assets) == (6, 1, 1)
    assert (stats.under_warranty, stats.expired_warranty, stats.expiring_warranty) == (4, 3, 1)
    assert stats.requires_action == 2
    assert (stats.assigned_assets, stats.unassigned_assets) == (5, 3)
    assert stats.total_asset_value == 218000
    assert stats.total_purchase_value == 370500
    assert stats.total_depreciation == 152500


def test_breakdowns_keep_first_seen_order(seeded):
    stats = calculate_dashboard_stats(seeded.registry.list_assets())
    names = [row["name"] for row in stats.assets_by_type]
    assert names == ["Laptop", "Desktop", "Monitor", "Printer", "Keyboard + Mouse Combo", "Headphone"]
    laptop = stats.assets_by_type[0]
    assert laptop == {"name": "Laptop", "count": 3, "value": 134000.0}
    assert "value" not in stats.assets_by_location[0]
    assert sort_breakdown(stats.assets_by_location)[0] == {"name": "Bangalore", "count": 4}


def test_removed_assets_only_in_status_breakdown(seeded):
    registry = seeded.registry
    registry.remove("A001", "Lost in transit")
    stats = calculate_dashboard_stats(registry.list_assets())
    assert stats.total_assets == 7
    assert stats.removed_assets == 1
    assert stats.total_asset_value == 218000 - 76000
    assert {"name": "Removed", "count": 1} in stats.assets_by_status
    assert sum(row["count"] for row in stats.assets_by_status) == 8


def test_recent_and_removed_lists(seeded):
    registry = seeded.registry
    registry.remove("A002", "Sold")
    assets = registry.list_assets()
    recent = get_recent_assets(assets)
    assert len(recent) == 5
    assert "A002" not in [a.id for a in recent]
    assert [a.id for a in get_removed_assets(assets)] == ["A002"]


@pytest.mark.parametrize("value, expected", [
    (218000, "₹2.18L"),
    (76000, "₹76.0K"),
    (500, "₹500"),
    (None, "₹0"),
    (-5000, "-₹5.0K"),
    (-250000, "-₹2.50L"),
    (-40, "-₹40"),
])
def test_format_currency(value, expected):
    assert format_currency(value) == expected
