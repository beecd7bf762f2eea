"""
Employee directory — people who may hold assets.
Deletion is refused while any asset still references the employee.
"""

import re
import logging
import threading

from config.constants import EMPLOYEE_TYPES, EMPLOYEE_TAXONOMY_FIELDS, DROPDOWN_CATEGORIES
from config.permissions import validate_action
from core.errors import ValidationError, NotFoundError, ConflictError, PermissionDeniedError
from core.models import Employee, EMPLOYEE_FIELDS

logger = logging.getLogger("AssetTracker")

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

REQUIRED_FIELDS = {
    "emp_no": "Employee number",
    "display_name": "Name",
    "department": "Department",
}


class EmployeeDirectory:
    """In-memory employee collection. ``asset_source`` answers assets_for_employee()."""

    def __init__(self, taxonomy=None, asset_source=None, audit=None):
        self.taxonomy = taxonomy
        self.asset_source = asset_source
        self.audit = audit
        self._employees = {}
        self._counter = 0
        self._lock = threading.Lock()

    def _authorize(self, action, user_role, description):
        if user_role is None:
            return
        result = validate_action(action, user_role)
        if not result.success:
            if self.audit:
                self.audit.log_activity_event(
                    action_type="ACCESS_DENIED",
                    category="security",
                    user_role=user_role,
                    description=f"Unauthorized employee action: {description}",
                    success=False,
                    error_message=result.message,
                )
            raise PermissionDeniedError(result.message)

    def _find(self, employee_id) -> Employee:
        employee = self._employees.get(employee_id)
        if employee is None:
            raise NotFoundError("Employee", employee_id)
        return employee

    @staticmethod
    def _normalize(data: dict) -> dict:
        clean = {}
        for key, value in (data or {}).items():
            if key not in EMPLOYEE_FIELDS or key == "id":
                continue
            if isinstance(value, str):
                value = value.strip()
            clean[key] = value or None
        return clean

    def _validate(self, record: dict, supplied: dict, current: Employee = None) -> list:
        exclude_id = current.id if current is not None else None
        errors = []
        for key, label in REQUIRED_FIELDS.items():
            if not record.get(key):
                errors.append(f"{label} is required")

        email = record.get("email")
        if not email:
            errors.append("Email is required")
        elif not EMAIL_PATTERN.match(email):
            errors.append(f"Invalid email address: {email}")

        if record.get("employee_type") not in EMPLOYEE_TYPES:
            errors.append(f"Employee type must be one of: {', '.join(EMPLOYEE_TYPES)}")

        emp_no = record.get("emp_no")
        if emp_no and any(
            e.id != exclude_id and e.emp_no.lower() == emp_no.lower()
            for e in self._employees.values()
        ):
            errors.append(f"Employee number {emp_no} already exists")

        if self.taxonomy is not None:
            for key, category in EMPLOYEE_TAXONOMY_FIELDS.items():
                if key not in supplied:
                    continue
                # Values already on record stay valid after their option is deleted
                stored = getattr(current, key) if current is not None else None
                if stored and supplied[key] and supplied[key].lower() == stored.lower():
                    continue
                if not self.taxonomy.validate_choice(category, supplied[key]):
                    errors.append(
                        f"'{supplied[key]}' is not a configured option for {DROPDOWN_CATEGORIES[category]}"
                    )
        return errors

    def _log(self, action_type, user_role, description, employee):
        logger.info(description)
        if self.audit:
            self.audit.log_activity_event(
                action_type=action_type,
                category="employees",
                user_role=user_role,
                description=description,
                entity_id=employee.id,
                entity_label=employee.emp_no,
            )

    # ============================================
    # MUTATIONS
    # ============================================
    def create(self, data: dict, user_role: str = None) -> Employee:
        self._authorize("create_employee", user_role, "create")
        clean = self._normalize(data)
        with self._lock:
            record = {**{f: None for f in EMPLOYEE_FIELDS}, **clean}
            errors = self._validate(record, clean)
            if errors:
                logger.warning(f"Employee create rejected: {'; '.join(errors)}")
                raise ValidationError(errors)
            self._counter += 1
            record["id"] = f"E{self._counter:03d}"
            employee = Employee(**record)
            self._employees[employee.id] = employee
        self._log("EMPLOYEE_CREATED", user_role, f"Employee {employee.display_name} ({employee.emp_no}) created", employee)
        return employee

    def update(self, employee_id: str, changes: dict, user_role: str = None) -> Employee:
        """Assets already holding a snapshot of this employee are left unchanged."""
        self._authorize("edit_employee", user_role, f"edit {employee_id}")
        clean = self._normalize(changes)
        with self._lock:
            employee = self._find(employee_id)
            merged = {**employee.to_dict(), **clean}
            errors = self._validate(merged, clean, current=employee)
            if errors:
                logger.warning(f"Employee {employee_id} update rejected: {'; '.join(errors)}")
                raise ValidationError(errors)
            for key, value in merged.items():
                setattr(employee, key, value)
        self._log("EMPLOYEE_UPDATED", user_role, f"Employee {employee.display_name} ({employee.emp_no}) updated", employee)
        return employee

    def delete(self, employee_id: str, user_role: str = None) -> None:
        self._authorize("delete_employee", user_role, f"delete {employee_id}")
        held = self.asset_source.assets_for_employee(employee_id) if self.asset_source else []
        with self._lock:
            employee = self._find(employee_id)
            if held:
                codes = ", ".join(a.asset_code for a in held)
                logger.warning(f"Employee {employee_id} delete blocked by assets: {codes}")
                raise ConflictError(
                    f"{employee.display_name} still holds {len(held)} asset(s) ({codes}). "
                    f"Unassign them before deleting."
                )
            del self._employees[employee_id]
        self._log("EMPLOYEE_DELETED", user_role, f"Employee {employee.display_name} ({employee.emp_no}) deleted", employee)

    # ============================================
    # READS
    # ============================================
    def get(self, employee_id: str) -> Employee:
        with self._lock:
            return self._find(employee_id)

    def list_employees(self) -> list:
        with self._lock:
            return list(self._employees.values())

    def filter_employees(self, search: str = "", department: str = None, employee_type: str = None) -> list:
        """Search over number, name, email and department. "All" means no filter."""
        needle = (search or "").strip().lower()
        result = []
        for employee in self.list_employees():
            if needle and not any(
                needle in (v or "").lower()
                for v in (employee.emp_no, employee.display_name, employee.email, employee.department)
            ):
                continue
            if department and department != "All" and employee.department != department:
                continue
            if employee_type and employee_type != "All" and employee.employee_type != employee_type:
                continue
            result.append(employee)
        return result

    def get_employee_stats(self) -> dict:
        employees = self.list_employees()
        return {
            "total": len(employees),
            "permanent": len([e for e in employees if e.employee_type == "Permanent"]),
            "contractual": len([e for e in employees if e.employee_type == "Contractual"]),
        }

    def get_departments(self) -> list:
        """Distinct departments in first-seen order, for filter dropdowns."""
        seen = []
        for employee in self.list_employees():
            if employee.department and employee.department not in seen:
                seen.append(employee.department)
        return seen
