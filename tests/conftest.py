"""Shared fixtures: a workspace on a fixed, controllable clock."""

from datetime import date, datetime, timedelta

import pytest

from core.data import AssetWorkspace

TODAY = date(2025, 1, 1)


class FixedClock:
    """Day is settable; now() advances one second per call so updated_at moves."""

    def __init__(self, day: date):
        self.day = day
        self._tick = 0

    def today(self) -> date:
        return self.day

    def now(self) -> datetime:
        self._tick += 1
        return datetime(self.day.year, self.day.month, self.day.day, 9, 0) + timedelta(seconds=self._tick)


@pytest.fixture
def clock():
    return FixedClock(TODAY)


@pytest.fixture
def workspace(clock):
    return AssetWorkspace(seed=False, today=clock.today, now=clock.now)


@pytest.fixture
def seeded(clock):
    return AssetWorkspace(seed=True, today=clock.today, now=clock.now)


@pytest.fixture
def asset_data():
    """Factory for a valid asset payload with overrides."""
    def make(**overrides):
        data = {
            "asset_code": "LPT-100",
            "asset_type": "Laptop",
            "department": "Engineering",
            "status": "Active",
            "brand": "Dell",
            "model": "Latitude 5520",
            "serial_no": "SN-100",
            "host_name": "HOST-100",
            "brief_config": "i7, 16GB RAM",
            "ownership": "Owned",
            "purchase_vendor": "Dell India",
            "date_of_purchase": "2024-05-01",
            "warranty_end_date": "2027-05-01",
            "warranty_type": "Warranty",
            "primary_location": "Bangalore",
            "user_department": "Engineering",
        }
        data.update(overrides)
        return data
    return make


@pytest.fixture
def employee_data():
    def make(**overrides):
        data = {
            "emp_no": "EMP001",
            "display_name": "Test User",
            "email": "test.user@example.com",
            "employee_type": "Permanent",
            "department": "Engineering",
            "sub_function": "Development",
        }
        data.update(overrides)
        return data
    return make
