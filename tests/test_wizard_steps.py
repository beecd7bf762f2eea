from datetime import date

import pytest

from services.asset_service import validate_step, ASSET_FORM_STEPS, normalize_asset_input

TODAY = date(2025, 1, 1)


def test_five_steps_in_order():
    assert [s["key"] for s in ASSET_FORM_STEPS] == ["basic", "hardware", "purchase", "warranty", "assignment"]


def test_basic_step_requires_its_fields_only():
    errors = validate_step(0, {}, today=TODAY)
    assert errors == [
        "Asset code is required",
        "Asset type is required",
        "Department is required",
        "Status is required",
    ]


def test_step_passes_with_later_steps_empty(asset_data):
    data = asset_data()
    basic = {k: data[k] for k in ("asset_code", "asset_type", "department", "status")}
    assert validate_step("basic", basic, today=TODAY) == []


def test_invalid_enum_values():
    errors = validate_step("basic", {
        "asset_code": "X", "asset_type": "Toaster", "department": "IT", "status": "Broken",
    }, today=TODAY)
    assert "Invalid status: Broken" in errors
    assert "Invalid asset type: Toaster" in errors


def test_purchase_step_rules(asset_data):
    errors = validate_step("purchase", asset_data(
        ownership="Leased", date_of_purchase="2025-03-01", purchase_price=-5, depreciation_rate=150,
    ), today=TODAY)
    assert "Lease contract code is required for leased assets" in errors
    assert "Date of purchase cannot be in the future" in errors
    assert "Purchase price cannot be negative" in errors
    assert "Depreciation rate must be between 0 and 100" in errors


def test_parse_errors_reported_on_their_own_step(asset_data):
    data = asset_data(date_of_purchase="15/06/2023", warranty_end_date="soon")
    purchase = validate_step("purchase", data, today=TODAY)
    assert "Date of purchase is not a valid date" in purchase
    assert not any(e.startswith("Warranty end date") for e in purchase)
    assert "Warranty end date is not a valid date" in validate_step("warranty", data, today=TODAY)


def test_amc_dates_only_checked_for_amc(asset_data):
    bad_range = {"amc_start_date": "2025-06-01", "amc_end_date": "2025-01-01"}
    assert validate_step("warranty", asset_data(**bad_range), today=TODAY) == []
    errors = validate_step("warranty", asset_data(warranty_type="AMC", **bad_range), today=TODAY)
    assert errors == ["AMC end date cannot be before AMC start date"]


def test_unknown_step_key():
    with pytest.raises(ValueError):
        validate_step("billing", {})


def test_normalize_drops_unknown_and_coerces():
    clean, errors = normalize_asset_input({
        "asset_code": "  LPT-1 ", "colour": "red", "purchase_price": "1200.5", "host_name": "   ",
    })
    assert clean == {"asset_code": "LPT-1", "purchase_price": 1200.5, "host_name": None}
    assert errors == []
