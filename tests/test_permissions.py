import pytest

from config.permissions import (
    has_permission, check_page_access, get_accessible_pages, validate_action, get_permitted_actions,
    can_edit_assets, can_delete_assets, can_edit_employees, can_delete_employees,
)


@pytest.mark.parametrize("role, pages", [
    ("admin", ["Dashboard", "Assets", "Employees", "Settings"]),
    ("hr", ["Dashboard", "Assets", "Employees"]),
    ("director", ["Dashboard", "Assets"]),
    (None, []),
])
def test_accessible_pages(role, pages):
    assert get_accessible_pages(role) == pages


def test_unknown_page_denied():
    assert not check_page_access("Billing", "admin")


def test_membership_only_no_hierarchy():
    assert has_permission("admin", ["admin"])
    assert not has_permission("admin", ["hr"])
    assert not has_permission("director", ["admin"])
    assert has_permission("admin", ["admin", "hr"])
    assert not has_permission("", ["hr"])


def test_validate_action_results():
    allowed = validate_action("delete_employee", "admin")
    assert allowed.success and bool(allowed)

    denied = validate_action("delete_employee", "hr")
    assert not denied
    assert "Access Denied" in denied.message
    assert "Admin" in denied.message

    assert not validate_action("launch_rockets", "admin")


def test_role_capabilities():
    assert can_edit_assets("admin") and can_delete_assets("admin")
    assert not can_edit_assets("hr")
    assert can_edit_employees("hr") and not can_delete_employees("hr")
    assert not can_edit_employees("director")


def test_permitted_actions_per_role():
    assert get_permitted_actions("director") == ["export_data"]
    assert set(get_permitted_actions("hr")) == {"create_employee", "edit_employee", "export_data"}
    assert len(get_permitted_actions("admin")) == 10
