from datetime import date

import pytest

from core.errors import ValidationError, NotFoundError, ConflictError, PermissionDeniedError
from services.asset_service import ensure_editable


# ============================================
# CREATE
# ============================================
def test_create_assigns_ids_and_derives_warranty(workspace, asset_data, clock):
    registry = workspace.registry
    first = registry.create(asset_data())
    second = registry.create(asset_data(asset_code="LPT-101", warranty_end_date="2025-01-20"))

    assert (first.id, first.s_no) == ("A001", 1)
    assert (second.id, second.s_no) == ("A002", 2)
    assert first.warranty_status == "Active"
    assert second.warranty_status == "Expiring Soon"
    assert first.date_of_purchase == date(2024, 5, 1)
    assert first.created_at == first.updated_at


def test_create_reports_every_missing_field(workspace):
    with pytest.raises(ValidationError) as exc:
        workspace.registry.create({"asset_type": "Laptop"})
    errors = exc.value.errors
    assert "Asset code is required" in errors
    assert "Serial number is required" in errors
    assert "Primary location is required" in errors
    assert workspace.registry.list_assets() == []


def test_asset_code_unique_case_insensitive_among_live_assets(workspace, asset_data):
    registry = workspace.registry
    original = registry.create(asset_data(asset_code="LPT-100"))
    with pytest.raises(ValidationError) as exc:
        registry.create(asset_data(asset_code="lpt-100"))
    assert "Asset code lpt-100 is already in use" in exc.value.errors

    registry.remove(original.id, "Sold")
    reused = registry.create(asset_data(asset_code="LPT-100"))
    assert reused.status == "Active"


def test_create_cannot_start_removed(workspace, asset_data):
    with pytest.raises(ValidationError) as exc:
        workspace.registry.create(asset_data(status="Removed"))
    assert "Status cannot be set to Removed here" in exc.value.errors


def test_leased_asset_needs_contract_code(workspace, asset_data):
    registry = workspace.registry
    with pytest.raises(ValidationError) as exc:
        registry.create(asset_data(ownership="Leased"))
    assert "Lease contract code is required for leased assets" in exc.value.errors

    leased = registry.create(asset_data(ownership="Leased", lease_contract_code="LC-1"))
    assert leased.lease_contract_code == "LC-1"


def test_lease_code_and_amc_dates_cleared_when_not_applicable(workspace, asset_data):
    asset = workspace.registry.create(asset_data(
        lease_contract_code="LC-9", amc_start_date="2025-01-01", amc_end_date="2026-01-01",
    ))
    assert asset.lease_contract_code is None
    assert asset.amc_start_date is None
    assert asset.amc_end_date is None


def test_amc_end_must_not_precede_start(workspace, asset_data):
    with pytest.raises(ValidationError) as exc:
        workspace.registry.create(asset_data(
            warranty_type="AMC", amc_start_date="2025-06-01", amc_end_date="2025-01-01",
        ))
    assert "AMC end date cannot be before AMC start date" in exc.value.errors


def test_future_purchase_date_rejected(workspace, asset_data):
    with pytest.raises(ValidationError) as exc:
        workspace.registry.create(asset_data(date_of_purchase="2025-01-02"))
    assert "Date of purchase cannot be in the future" in exc.value.errors


def test_read_only_fields_in_input_are_ignored(workspace, asset_data):
    asset = workspace.registry.create(asset_data(id="X999", s_no=42, warranty_status="Expired"))
    assert asset.id == "A001"
    assert asset.s_no == 1
    assert asset.warranty_status == "Active"


def test_taxonomy_checked_case_insensitively(workspace, asset_data):
    workspace.taxonomy.add_option("brand", "Dell")
    with pytest.raises(ValidationError) as exc:
        workspace.registry.create(asset_data(brand="Acme"))
    assert "'Acme' is not a configured option for Brands" in exc.value.errors

    assert workspace.registry.create(asset_data(brand="dell")).brand == "dell"


def test_create_with_employee_copies_snapshot(workspace, asset_data, employee_data):
    employee = workspace.directory.create(employee_data())
    asset = workspace.registry.create(asset_data(employee_id=employee.id, employee_name="Spoofed"))
    assert asset.employee_id == employee.id
    assert asset.employee_name == "Test User"
    assert asset.employee_email == "test.user@example.com"
    assert asset.employee_type == "Permanent"
    assert asset.assigned_date == date(2025, 1, 1)


def test_create_with_unknown_employee_fails(workspace, asset_data):
    with pytest.raises(NotFoundError):
        workspace.registry.create(asset_data(employee_id="E404"))
    assert workspace.registry.list_assets() == []


# ============================================
# UPDATE / REMOVE / DELETE
# ============================================
def test_update_merges_and_stamps(workspace, asset_data):
    registry = workspace.registry
    asset = registry.create(asset_data())
    created_at = asset.created_at

    updated = registry.update(asset.id, {"model": "Latitude 7440", "warranty_end_date": "2024-12-01"})
    assert updated.model == "Latitude 7440"
    assert updated.warranty_status == "Expired"
    assert updated.created_at == created_at
    assert updated.updated_at > created_at


def test_update_rejects_invalid_merge_without_changes(workspace, asset_data):
    registry = workspace.registry
    asset = registry.create(asset_data())
    with pytest.raises(ValidationError):
        registry.update(asset.id, {"serial_no": "", "model": "Changed"})
    assert registry.get(asset.id).model == "Latitude 5520"


def test_update_ignores_assignment_and_snapshot_fields(workspace, asset_data, employee_data):
    employee = workspace.directory.create(employee_data())
    asset = workspace.registry.create(asset_data())
    updated = workspace.registry.update(asset.id, {"employee_id": employee.id, "employee_name": "X"})
    assert updated.employee_id is None
    assert updated.employee_name is None


def test_update_unknown_asset(workspace):
    with pytest.raises(NotFoundError):
        workspace.registry.update("A404", {"model": "x"})


def test_remove_marks_removed_with_reason(workspace, asset_data):
    registry = workspace.registry
    asset = registry.create(asset_data())
    removed = registry.remove(asset.id, "  Damaged beyond repair ")
    assert removed.status == "Removed"
    assert removed.removed_date == date(2025, 1, 1)
    assert removed.removal_reason == "Damaged beyond repair"
    assert registry.get(asset.id) is removed


def test_remove_requires_reason_and_live_asset(workspace, asset_data):
    registry = workspace.registry
    asset = registry.create(asset_data())
    with pytest.raises(ConflictError):
        registry.remove(asset.id, "   ")
    assert registry.get(asset.id).status == "Active"

    registry.remove(asset.id, "Sold")
    with pytest.raises(ConflictError):
        registry.remove(asset.id, "Again")


def test_removed_asset_is_not_editable(workspace, asset_data):
    asset = workspace.registry.create(asset_data())
    ensure_editable(asset)
    workspace.registry.remove(asset.id, "Lost")
    with pytest.raises(ConflictError):
        ensure_editable(asset)


def test_delete_is_permanent(workspace, asset_data):
    registry = workspace.registry
    asset = registry.create(asset_data())
    registry.delete(asset.id)
    with pytest.raises(NotFoundError):
        registry.get(asset.id)
    with pytest.raises(NotFoundError):
        registry.delete(asset.id)


def test_ids_not_reused_after_delete(workspace, asset_data):
    registry = workspace.registry
    first = registry.create(asset_data())
    registry.delete(first.id)
    second = registry.create(asset_data())
    assert second.id == "A002"


# ============================================
# ASSIGN
# ============================================
def test_assign_fills_from_employee(workspace, asset_data, employee_data):
    employee = workspace.directory.create(employee_data(department="Finance", sub_function="Accounts"))
    asset = workspace.registry.create(asset_data())

    assigned = workspace.registry.assign(asset.id, employee.id, primary_location="Mumbai")
    assert assigned.employee_name == "Test User"
    assert assigned.user_department == "Finance"
    assert assigned.sub_function == "Accounts"
    assert assigned.primary_location == "Mumbai"
    assert assigned.assigned_date == date(2025, 1, 1)


def test_assign_blank_clears_holder_but_keeps_required_fields(workspace, asset_data, employee_data):
    employee = workspace.directory.create(employee_data())
    asset = workspace.registry.create(asset_data(employee_id=employee.id))

    cleared = workspace.registry.assign(asset.id, "", user_department="")
    assert cleared.employee_id is None
    assert cleared.employee_name is None
    assert cleared.employee_email is None
    assert cleared.assigned_date is None
    assert cleared.user_department == "Engineering"


def test_assign_rejects_unknown_fields_and_employees(workspace, asset_data):
    asset = workspace.registry.create(asset_data())
    with pytest.raises(ValidationError):
        workspace.registry.assign(asset.id, None, status="Inactive")
    with pytest.raises(NotFoundError):
        workspace.registry.assign(asset.id, "E404")


def test_employee_snapshot_not_refreshed_on_employee_edit(workspace, asset_data, employee_data):
    employee = workspace.directory.create(employee_data())
    asset = workspace.registry.create(asset_data(employee_id=employee.id))
    workspace.directory.update(employee.id, {"display_name": "Renamed User"})
    assert workspace.registry.get(asset.id).employee_name == "Test User"


# ============================================
# ACCESS CONTROL / AUDIT
# ============================================
def test_role_without_permission_is_denied_and_audited(workspace, asset_data):
    with pytest.raises(PermissionDeniedError):
        workspace.registry.create(asset_data(), user_role="hr")
    assert workspace.registry.list_assets() == []

    denied = workspace.audit.entries(category="security")
    assert denied[0]["action_type"] == "ACCESS_DENIED"
    assert denied[0]["success"] is False


def test_admin_mutations_are_audited(workspace, asset_data):
    registry = workspace.registry
    asset = registry.create(asset_data(), user_role="admin")
    registry.update(asset.id, {"model": "New"}, user_role="admin")
    registry.remove(asset.id, "Sold", user_role="admin")
    registry.delete(asset.id, user_role="admin")

    actions = [e["action_type"] for e in workspace.audit.entries(category="assets")]
    assert actions == ["ASSET_DELETED", "ASSET_REMOVED", "ASSET_UPDATED", "ASSET_CREATED"]


# ============================================
# READS
# ============================================
def test_refresh_warranty_statuses_follows_clock(workspace, asset_data, clock):
    registry = workspace.registry
    asset = registry.create(asset_data(warranty_end_date="2025-01-20"))
    assert registry.refresh_warranty_statuses() == 0

    clock.day = date(2025, 1, 21)
    assert registry.refresh_warranty_statuses() == 1
    assert asset.warranty_status == "Expired"


def test_filter_assets(seeded):
    registry = seeded.registry
    assert {a.asset_code for a in registry.filter_assets("dell")} == {"BTSPL-LPT-001", "BTSPL-LPT-003"}
    assert [a.asset_code for a in registry.filter_assets("rahul")] == ["BTSPL-LPT-001"]
    assert len(registry.filter_assets(status="Inactive")) == 1
    assert len(registry.filter_assets(asset_type="Laptop")) == 3
    assert len(registry.filter_assets(warranty_status="Expired")) == 3
    assert len(registry.filter_assets("", "All", "All", "All")) == 8


def test_list_assets_can_hide_removed(seeded):
    registry = seeded.registry
    target = registry.list_assets()[0]
    registry.remove(target.id, "Disposed")
    assert len(registry.list_assets()) == 8
    assert len(registry.list_assets(include_removed=False)) == 7
    assert len(registry.filter_assets(include_removed=False)) == 7


def test_assets_for_employee(seeded):
    held = seeded.registry.assets_for_employee("E001")
    assert [a.asset_code for a in held] == ["BTSPL-LPT-001"]
    assert seeded.registry.assets_for_employee("") == []


# ============================================
# DELETED DROPDOWN VALUES
# ============================================
def _delete_option(taxonomy, category, value):
    option = next(o for o in taxonomy.get_options(category) if o.value == value)
    taxonomy.delete_option(option.id)


def test_edit_keeps_value_whose_option_was_deleted(seeded):
    registry = seeded.registry
    asset = registry.get("A001")
    _delete_option(seeded.taxonomy, "brand", "Dell")

    updated = registry.update(asset.id, {**asset.to_dict(), "asset_remark": "checked"})
    assert updated.brand == "Dell"
    assert updated.asset_remark == "checked"

    with pytest.raises(ValidationError) as exc:
        registry.update(asset.id, {"brand": "Acme"})
    assert "'Acme' is not a configured option for Brands" in exc.value.errors


def test_assign_keeps_location_whose_option_was_deleted(seeded):
    registry = seeded.registry
    _delete_option(seeded.taxonomy, "location", "Bangalore")

    assigned = registry.assign("A001", "E005", primary_location="bangalore")
    assert assigned.employee_id == "E005"
    assert assigned.primary_location == "bangalore"

    with pytest.raises(ValidationError):
        registry.assign("A001", "E005", primary_location="Atlantis")
    assert registry.get("A001").primary_location == "bangalore"
