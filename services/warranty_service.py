"""
Warranty status derivation.
The status is a pure function of the warranty end date and the evaluation day.
"""

from datetime import date, timedelta

from config.constants import WARRANTY_EXPIRING_DAYS
from core.models import parse_date


def derive_warranty_status(warranty_end_date, today: date = None) -> str:
    """
    Classify a warranty end date relative to ``today``.

    Same-day expiry is already Expired; an end date exactly
    WARRANTY_EXPIRING_DAYS ahead is still Expiring Soon.
    """
    end = parse_date(warranty_end_date)
    today = today or date.today()

    if end <= today:
        return "Expired"
    if end <= today + timedelta(days=WARRANTY_EXPIRING_DAYS):
        return "Expiring Soon"
    return "Active"


def days_until_expiry(warranty_end_date, today: date = None) -> int:
    """Negative once the warranty has lapsed."""
    today = today or date.today()
    return (parse_date(warranty_end_date) - today).days


def get_warranty_alerts(assets, limit: int = 5) -> list:
    """Expired then expiring non-removed assets, for the dashboard alert panel."""
    live = [a for a in assets if not a.is_removed]
    expired = [{"asset": a, "alert_type": "expired"} for a in live if a.warranty_status == "Expired"]
    expiring = [{"asset": a, "alert_type": "expiring"} for a in live if a.warranty_status == "Expiring Soon"]
    return (expired + expiring)[:limit]
