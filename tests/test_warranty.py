from datetime import date

from services.warranty_service import derive_warranty_status, days_until_expiry, get_warranty_alerts

TODAY = date(2025, 1, 1)


def test_past_end_date_is_expired():
    assert derive_warranty_status(date(2024, 12, 31), TODAY) == "Expired"


def test_same_day_end_is_already_expired():
    assert derive_warranty_status(TODAY, TODAY) == "Expired"
    assert derive_warranty_status(date(2025, 1, 2), TODAY) == "Expiring Soon"


def test_thirty_day_boundary_is_expiring_soon():
    assert derive_warranty_status(date(2025, 1, 31), TODAY) == "Expiring Soon"
    assert derive_warranty_status(date(2025, 2, 1), TODAY) == "Active"


def test_accepts_iso_strings():
    assert derive_warranty_status("2030-01-01", TODAY) == "Active"


def test_days_until_expiry_negative_after_lapse():
    assert days_until_expiry(date(2024, 12, 25), TODAY) == -7
    assert days_until_expiry(date(2025, 1, 11), TODAY) == 10


def test_alerts_list_expired_before_expiring_and_skip_removed(seeded):
    registry = seeded.registry
    alerts = get_warranty_alerts(registry.list_assets(), limit=10)
    types = [a["alert_type"] for a in alerts]
    assert types == ["expired", "expired", "expired", "expiring"]

    expired_code = alerts[0]["asset"].asset_code
    asset = next(a for a in registry.list_assets() if a.asset_code == expired_code)
    registry.remove(asset.id, "Disposed")
    codes = [a["asset"].asset_code for a in get_warranty_alerts(registry.list_assets(), limit=10)]
    assert expired_code not in codes


def test_alerts_respect_limit(seeded):
    assert len(get_warranty_alerts(seeded.registry.list_assets(), limit=2)) == 2
