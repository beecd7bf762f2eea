import pytest

from core.errors import ValidationError, NotFoundError, ConflictError, PermissionDeniedError


def test_create_assigns_sequential_ids(workspace, employee_data):
    directory = workspace.directory
    first = directory.create(employee_data())
    second = directory.create(employee_data(emp_no="EMP002", email="second@example.com"))
    assert (first.id, second.id) == ("E001", "E002")
    assert directory.get("E002").email == "second@example.com"


def test_required_fields_and_email(workspace, employee_data):
    with pytest.raises(ValidationError) as exc:
        workspace.directory.create(employee_data(emp_no="", display_name=" ", email=""))
    errors = exc.value.errors
    assert "Employee number is required" in errors
    assert "Name is required" in errors
    assert "Email is required" in errors


def test_invalid_email_rejected(workspace, employee_data):
    with pytest.raises(ValidationError) as exc:
        workspace.directory.create(employee_data(email="not-an-email"))
    assert "Invalid email address: not-an-email" in exc.value.errors


def test_employee_type_must_be_known(workspace, employee_data):
    with pytest.raises(ValidationError):
        workspace.directory.create(employee_data(employee_type="Intern"))


def test_emp_no_unique_ignoring_case(workspace, employee_data):
    directory = workspace.directory
    directory.create(employee_data(emp_no="EMP001"))
    with pytest.raises(ValidationError) as exc:
        directory.create(employee_data(emp_no="emp001", email="other@example.com"))
    assert "Employee number emp001 already exists" in exc.value.errors


def test_update_may_keep_own_emp_no(workspace, employee_data):
    directory = workspace.directory
    employee = directory.create(employee_data())
    updated = directory.update(employee.id, {"emp_no": "EMP001", "department": "Finance"})
    assert updated.department == "Finance"


def test_department_checked_against_taxonomy(workspace, employee_data):
    workspace.taxonomy.add_option("department", "Engineering")
    with pytest.raises(ValidationError):
        workspace.directory.create(employee_data(department="Astrology"))
    assert workspace.directory.create(employee_data()).department == "Engineering"


def test_delete_blocked_while_holding_assets(workspace, employee_data, asset_data):
    employee = workspace.directory.create(employee_data())
    asset = workspace.registry.create(asset_data(employee_id=employee.id))

    with pytest.raises(ConflictError) as exc:
        workspace.directory.delete(employee.id)
    assert "LPT-100" in exc.value.message
    assert workspace.directory.get(employee.id) is employee

    workspace.registry.assign(asset.id, None)
    workspace.directory.delete(employee.id)
    with pytest.raises(NotFoundError):
        workspace.directory.get(employee.id)


def test_delete_unknown_employee(workspace):
    with pytest.raises(NotFoundError):
        workspace.directory.delete("E404")


def test_hr_can_edit_but_not_delete(workspace, employee_data):
    directory = workspace.directory
    employee = directory.create(employee_data(), user_role="hr")
    directory.update(employee.id, {"display_name": "HR Edited"}, user_role="hr")
    with pytest.raises(PermissionDeniedError):
        directory.delete(employee.id, user_role="hr")
    with pytest.raises(PermissionDeniedError):
        directory.create(employee_data(emp_no="EMP009"), user_role="director")
    assert directory.get(employee.id).display_name == "HR Edited"


def test_stats_filters_and_departments(seeded):
    directory = seeded.directory
    assert directory.get_employee_stats() == {"total": 6, "permanent": 4, "contractual": 2}
    assert [e.display_name for e in directory.filter_employees("priya")] == ["Priya Patel"]
    assert len(directory.filter_employees(department="Engineering")) == 2
    assert len(directory.filter_employees(employee_type="Contractual")) == 2
    assert len(directory.filter_employees("", "All", "All")) == 6
    assert directory.get_departments() == ["Engineering", "HR", "IT", "Finance", "Marketing"]


def test_edit_keeps_department_whose_option_was_deleted(seeded):
    taxonomy = seeded.taxonomy
    option = next(o for o in taxonomy.get_options("department") if o.value == "Engineering")
    taxonomy.delete_option(option.id)

    employee = seeded.directory.get("E001")
    renamed = seeded.directory.update(employee.id, {**employee.to_dict(), "display_name": "Rahul S."})
    assert renamed.display_name == "Rahul S."
    assert renamed.department == "Engineering"

    with pytest.raises(ValidationError):
        seeded.directory.update(employee.id, {"department": "Astrology"})


def test_removed_asset_holder_can_be_released_before_delete(seeded):
    seeded.registry.remove("A001", "Damaged beyond repair")
    with pytest.raises(ConflictError):
        seeded.directory.delete("E001")

    released = seeded.registry.assign("A001", None)
    assert released.status == "Removed"
    assert released.employee_id is None
    seeded.directory.delete("E001")
    with pytest.raises(NotFoundError):
        seeded.directory.get("E001")
