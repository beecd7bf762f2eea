"""
Asset operations — the asset registry.
Handles validation, lifecycle transitions (removal, hard delete),
employee assignment and the asset form wizard steps.
"""

import logging
import threading
from datetime import date, datetime

from config.constants import (
    ASSET_TYPES, ASSET_STATUSES, EDITABLE_STATUSES, OWNERSHIP_TYPES,
    WARRANTY_TYPES, ASSET_TAXONOMY_FIELDS, DROPDOWN_CATEGORIES,
)
from config.permissions import validate_action
from core.errors import ValidationError, NotFoundError, ConflictError, PermissionDeniedError
from core.models import Asset, ASSET_FIELDS, ASSET_DATE_FIELDS, ASSET_MONEY_FIELDS, parse_date
from services.warranty_service import derive_warranty_status

logger = logging.getLogger("AssetTracker")

# ============================================
# FIELD RULES
# ============================================
FIELD_LABELS = {
    "asset_code": "Asset code",
    "asset_type": "Asset type",
    "department": "Department",
    "status": "Status",
    "action": "Action",
    "brand": "Brand",
    "model": "Model",
    "serial_no": "Serial number",
    "host_name": "Host name",
    "brief_config": "Configuration",
    "ownership": "Ownership",
    "purchase_vendor": "Purchase vendor",
    "date_of_purchase": "Date of purchase",
    "purchase_price": "Purchase price",
    "current_value": "Current value",
    "depreciation_rate": "Depreciation rate",
    "lease_contract_code": "Lease contract code",
    "warranty_end_date": "Warranty end date",
    "warranty_type": "Warranty type",
    "amc_start_date": "AMC start date",
    "amc_end_date": "AMC end date",
    "primary_location": "Primary location",
    "user_department": "User department",
    "sub_function": "Sub function",
    "assigned_date": "Assigned date",
    "physically_verified": "Physically verified",
    "asset_remark": "Remark",
}

# Never accepted from create/update input
READ_ONLY_FIELDS = (
    "id", "s_no", "created_at", "updated_at", "warranty_status",
    "removed_date", "removal_reason",
)

# Written only through assign()
EMPLOYEE_SNAPSHOT_FIELDS = ("employee_name", "employee_email", "employee_type")

ASSIGNMENT_FIELDS = (
    "primary_location", "user_department", "sub_function",
    "assigned_date", "physically_verified", "asset_remark",
)

ENUM_FIELDS = {
    "asset_type": ASSET_TYPES,
    "ownership": OWNERSHIP_TYPES,
    "warranty_type": WARRANTY_TYPES,
}

# Asset form wizard: each step gates the fields it lists
ASSET_FORM_STEPS = [
    {"key": "basic", "title": "Basic Info",
     "fields": ["asset_code", "asset_type", "department", "status"]},
    {"key": "hardware", "title": "Hardware",
     "fields": ["brand", "model", "serial_no", "host_name", "brief_config"]},
    {"key": "purchase", "title": "Purchase",
     "fields": ["ownership", "purchase_vendor", "date_of_purchase"]},
    {"key": "warranty", "title": "Warranty",
     "fields": ["warranty_end_date", "warranty_type"]},
    {"key": "assignment", "title": "Assignment",
     "fields": ["primary_location", "user_department"]},
]

REQUIRED_FIELDS = tuple(f for step in ASSET_FORM_STEPS for f in step["fields"])


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _same_choice(value, stored) -> bool:
    if value is None or stored is None:
        return value is stored
    return str(value).strip().lower() == str(stored).strip().lower()


def normalize_asset_input(data: dict):
    """
    Coerce raw form/import values into field types.
    Returns (clean_dict, errors). Unknown keys are dropped.
    """
    clean = {}
    errors = []
    for key, value in (data or {}).items():
        if key not in ASSET_FIELDS:
            continue
        if isinstance(value, str):
            value = value.strip()
        if _is_blank(value):
            clean[key] = None
            continue
        if key in ASSET_DATE_FIELDS:
            try:
                value = parse_date(value)
            except (ValueError, TypeError):
                errors.append(f"{FIELD_LABELS.get(key, key)} is not a valid date")
                continue
        elif key in ASSET_MONEY_FIELDS:
            try:
                value = float(value)
            except (ValueError, TypeError):
                errors.append(f"{FIELD_LABELS.get(key, key)} must be a number")
                continue
        clean[key] = value
    return clean, errors


def validate_step(step, data: dict, today: date = None) -> list:
    """
    Validate the fields one wizard step gates.

    Args:
        step: Step index or key from ASSET_FORM_STEPS
        data: Form values collected so far (raw or normalized)

    Returns:
        List of error messages; empty when the wizard may advance
    """
    if isinstance(step, int):
        step_def = ASSET_FORM_STEPS[step]
    else:
        step_def = next((s for s in ASSET_FORM_STEPS if s["key"] == step), None)
        if step_def is None:
            raise ValueError(f"Unknown form step: {step}")

    record, parse_errors = normalize_asset_input(data)
    today = today or date.today()
    errors = []

    for field_name in step_def["fields"]:
        if _is_blank(record.get(field_name)):
            errors.append(f"{FIELD_LABELS[field_name]} is required")

    key = step_def["key"]
    errors.extend(e for e in parse_errors if _error_in_step(e, step_def))

    if key == "basic":
        status = record.get("status")
        if status and status not in ASSET_STATUSES:
            errors.append(f"Invalid status: {status}")
    for field_name in step_def["fields"]:
        allowed = ENUM_FIELDS.get(field_name)
        value = record.get(field_name)
        if allowed and value and value not in allowed:
            errors.append(f"Invalid {FIELD_LABELS[field_name].lower()}: {value}")

    if key == "purchase":
        purchased = record.get("date_of_purchase")
        if purchased and purchased > today:
            errors.append("Date of purchase cannot be in the future")
        if record.get("ownership") == "Leased" and _is_blank(record.get("lease_contract_code")):
            errors.append("Lease contract code is required for leased assets")
        for money in ("purchase_price", "current_value"):
            if record.get(money) is not None and record[money] < 0:
                errors.append(f"{FIELD_LABELS[money]} cannot be negative")
        rate = record.get("depreciation_rate")
        if rate is not None and not 0 <= rate <= 100:
            errors.append("Depreciation rate must be between 0 and 100")

    if key == "warranty" and record.get("warranty_type") == "AMC":
        start, end = record.get("amc_start_date"), record.get("amc_end_date")
        if start and end and end < start:
            errors.append("AMC end date cannot be before AMC start date")

    return errors


def _error_in_step(message: str, step_def: dict) -> bool:
    labels = [FIELD_LABELS[f] for f in step_def["fields"]]
    if step_def["key"] == "purchase":
        labels += [FIELD_LABELS[f] for f in ASSET_MONEY_FIELDS]
    if step_def["key"] == "warranty":
        labels += [FIELD_LABELS["amc_start_date"], FIELD_LABELS["amc_end_date"]]
    return any(message.startswith(label) for label in labels)


def ensure_editable(asset: Asset):
    """Removed assets can only be viewed or hard-deleted."""
    if asset.is_removed:
        raise ConflictError(f"Asset {asset.asset_code} has been removed and cannot be edited")


class AssetRegistry:
    """
    In-memory asset collection.

    Args:
        taxonomy: DropdownTaxonomyStore used for input-time checks
        directory: EmployeeDirectory used to snapshot assignees
        audit: AuditTrail receiving one entry per mutation
        today / now: clock providers (overridable for tests)
    """

    def __init__(self, taxonomy=None, directory=None, audit=None, today=None, now=None):
        self.taxonomy = taxonomy
        self.directory = directory
        self.audit = audit
        self._today = today or date.today
        self._now = now or datetime.now
        self._assets = {}
        self._counter = 0
        self._lock = threading.Lock()

    # ============================================
    # INTERNALS
    # ============================================
    def _authorize(self, action, user_role, description):
        """RBAC check. ``user_role=None`` marks a system call (seeding, tests)."""
        if user_role is None:
            return
        result = validate_action(action, user_role)
        if not result.success:
            if self.audit:
                self.audit.log_activity_event(
                    action_type="ACCESS_DENIED",
                    category="security",
                    user_role=user_role,
                    description=f"Unauthorized asset action: {description}",
                    success=False,
                    error_message=result.message,
                )
            logger.warning(f"Denied {action} for role={user_role}")
            raise PermissionDeniedError(result.message)

    def _find(self, asset_id) -> Asset:
        asset = self._assets.get(asset_id)
        if asset is None:
            raise NotFoundError("Asset", asset_id)
        return asset

    def _next_id(self) -> str:
        self._counter += 1
        return f"A{self._counter:03d}"

    def _next_s_no(self) -> int:
        return max((a.s_no for a in self._assets.values()), default=0) + 1

    def _resolve_employee(self, employee_id):
        if _is_blank(employee_id):
            return None
        if self.directory is None:
            raise NotFoundError("Employee", employee_id)
        return self.directory.get(employee_id)

    def _taxonomy_errors(self, supplied: dict, current: Asset = None) -> list:
        """Check supplied dropdown values. Values already stored on ``current`` pass as they are."""
        if self.taxonomy is None:
            return []
        errors = []
        for field_name, category in ASSET_TAXONOMY_FIELDS.items():
            if field_name not in supplied:
                continue
            value = supplied[field_name]
            if current is not None and _same_choice(value, getattr(current, field_name)):
                continue
            if not self.taxonomy.validate_choice(category, value):
                errors.append(
                    f"'{value}' is not a configured option for {DROPDOWN_CATEGORIES[category]}"
                )
        return errors

    def _code_taken(self, asset_code, exclude_id=None) -> bool:
        code = asset_code.strip().lower()
        return any(
            a.id != exclude_id and not a.is_removed and a.asset_code.strip().lower() == code
            for a in self._assets.values()
        )

    def _validate_record(self, record: dict, allowed_statuses, exclude_id=None) -> list:
        today = self._today()
        errors = []
        for index in range(len(ASSET_FORM_STEPS)):
            errors.extend(validate_step(index, record, today=today))
        status = record.get("status")
        if status and status in ASSET_STATUSES and status not in allowed_statuses:
            errors.append(f"Status cannot be set to {status} here")
        if record.get("asset_code") and status != "Removed" \
                and self._code_taken(record["asset_code"], exclude_id):
            errors.append(f"Asset code {record['asset_code']} is already in use")
        return errors

    @staticmethod
    def _apply_conditional_fields(record: dict):
        # Lease code belongs to leased assets only, AMC dates to AMC cover only
        if record.get("ownership") != "Leased":
            record["lease_contract_code"] = None
        if record.get("warranty_type") != "AMC":
            record["amc_start_date"] = None
            record["amc_end_date"] = None

    def _log(self, action_type, user_role, description, asset, old_value=None, new_value=None):
        logger.info(description)
        if self.audit:
            self.audit.log_activity_event(
                action_type=action_type,
                category="assets",
                user_role=user_role,
                description=description,
                entity_id=asset.id,
                entity_label=asset.asset_code,
                old_value=old_value,
                new_value=new_value,
            )

    # ============================================
    # MUTATIONS
    # ============================================
    def create(self, data: dict, user_role: str = None) -> Asset:
        """Validate and add a new asset. Raises ValidationError with every problem found."""
        self._authorize("create_asset", user_role, "create")
        record, errors = normalize_asset_input(data)
        for key in READ_ONLY_FIELDS + EMPLOYEE_SNAPSHOT_FIELDS:
            record.pop(key, None)
        supplied = dict(record)
        employee = self._resolve_employee(record.get("employee_id"))

        with self._lock:
            record = {**{f: None for f in ASSET_FIELDS}, **record}
            self._apply_conditional_fields(record)
            errors += self._validate_record(record, EDITABLE_STATUSES)
            errors += self._taxonomy_errors(supplied)
            if errors:
                logger.warning(f"Asset create rejected: {'; '.join(errors)}")
                raise ValidationError(errors)

            now = self._now()
            record["id"] = self._next_id()
            record["s_no"] = self._next_s_no()
            record["created_at"] = now
            record["updated_at"] = now
            record["warranty_status"] = derive_warranty_status(record["warranty_end_date"], self._today())
            if employee:
                record["employee_id"] = employee.id
                record["employee_name"] = employee.display_name
                record["employee_email"] = employee.email
                record["employee_type"] = employee.employee_type
                record["assigned_date"] = record["assigned_date"] or self._today()
            else:
                record["employee_id"] = None

            asset = Asset(**record)
            self._assets[asset.id] = asset

        self._log("ASSET_CREATED", user_role, f"Asset {asset.asset_code} created ({asset.id})", asset)
        return asset

    def update(self, asset_id: str, changes: dict, user_role: str = None) -> Asset:
        """
        Merge ``changes`` into an asset and revalidate the whole record.
        Employee assignment goes through assign(); snapshot fields are ignored here.
        """
        self._authorize("edit_asset", user_role, f"edit {asset_id}")
        clean, errors = normalize_asset_input(changes)
        for key in READ_ONLY_FIELDS + EMPLOYEE_SNAPSHOT_FIELDS + ("employee_id",):
            clean.pop(key, None)

        with self._lock:
            asset = self._find(asset_id)
            merged = {**asset.to_dict(), **clean}
            self._apply_conditional_fields(merged)
            allowed = ASSET_STATUSES if asset.is_removed else EDITABLE_STATUSES
            errors += self._validate_record(merged, allowed, exclude_id=asset_id)
            errors += self._taxonomy_errors(clean, current=asset)
            if errors:
                logger.warning(f"Asset {asset_id} update rejected: {'; '.join(errors)}")
                raise ValidationError(errors)

            changed = [k for k in clean if getattr(asset, k) != merged[k]]
            for key in ASSET_FIELDS:
                if key not in READ_ONLY_FIELDS:
                    setattr(asset, key, merged[key])
            asset.warranty_status = derive_warranty_status(asset.warranty_end_date, self._today())
            asset.updated_at = self._now()

        self._log(
            "ASSET_UPDATED", user_role,
            f"Asset {asset.asset_code} updated ({asset.id})", asset,
            new_value=", ".join(changed) or None,
        )
        return asset

    def remove(self, asset_id: str, reason: str, user_role: str = None) -> Asset:
        """Soft removal: status becomes Removed and the reason is kept."""
        self._authorize("remove_asset", user_role, f"remove {asset_id}")
        reason = (reason or "").strip()

        with self._lock:
            asset = self._find(asset_id)
            if not reason:
                raise ConflictError("A reason is required to remove an asset")
            if asset.is_removed:
                raise ConflictError(f"Asset {asset.asset_code} is already removed")
            old_status = asset.status
            asset.status = "Removed"
            asset.removed_date = self._today()
            asset.removal_reason = reason
            asset.updated_at = self._now()

        self._log(
            "ASSET_REMOVED", user_role,
            f"Asset {asset.asset_code} removed: {reason}", asset,
            old_value=old_status, new_value="Removed",
        )
        return asset

    def delete(self, asset_id: str, user_role: str = None) -> None:
        """Irreversible hard delete. No reference checks."""
        self._authorize("delete_asset", user_role, f"delete {asset_id}")
        with self._lock:
            asset = self._find(asset_id)
            del self._assets[asset_id]
        self._log("ASSET_DELETED", user_role, f"Asset {asset.asset_code} permanently deleted", asset)

    def assign(self, asset_id: str, employee_id, user_role: str = None, **assignment_fields) -> Asset:
        """
        Set or clear the asset holder.

        The employee's name, email and type are copied onto the asset now and
        are not refreshed when the employee record changes later. A blank
        ``employee_id`` clears the holder and the snapshot.
        """
        self._authorize("assign_asset", user_role, f"assign {asset_id}")
        unknown = [k for k in assignment_fields if k not in ASSIGNMENT_FIELDS]
        if unknown:
            raise ValidationError([f"Unknown assignment field: {k}" for k in unknown])
        clean, errors = normalize_asset_input(assignment_fields)
        if errors:
            raise ValidationError(errors)
        employee = self._resolve_employee(employee_id)

        with self._lock:
            asset = self._find(asset_id)
            errors = self._taxonomy_errors(clean, current=asset)
            if errors:
                logger.warning(f"Asset {asset_id} assignment rejected: {'; '.join(errors)}")
                raise ValidationError(errors)
            previous = asset.employee_name
            if employee:
                if not clean.get("user_department"):
                    clean["user_department"] = employee.department
                if not clean.get("sub_function") and employee.sub_function:
                    clean["sub_function"] = employee.sub_function
                if not clean.get("assigned_date"):
                    clean["assigned_date"] = self._today()
                asset.employee_id = employee.id
                asset.employee_name = employee.display_name
                asset.employee_email = employee.email
                asset.employee_type = employee.employee_type
            else:
                asset.employee_id = None
                asset.employee_name = None
                asset.employee_email = None
                asset.employee_type = None
                clean["assigned_date"] = None
            for key, value in clean.items():
                # Required location fields keep their value when left blank
                if value is None and key in REQUIRED_FIELDS:
                    continue
                setattr(asset, key, value)
            asset.updated_at = self._now()

        self._log(
            "ASSET_ASSIGNED", user_role,
            f"Asset {asset.asset_code} assigned to {asset.employee_name or 'nobody'}", asset,
            old_value=previous, new_value=asset.employee_name,
        )
        return asset

    def refresh_warranty_statuses(self) -> int:
        """Re-derive every warranty status for the current day. Returns how many changed."""
        today = self._today()
        changed = 0
        with self._lock:
            for asset in self._assets.values():
                status = derive_warranty_status(asset.warranty_end_date, today)
                if status != asset.warranty_status:
                    asset.warranty_status = status
                    changed += 1
        if changed:
            logger.info(f"Warranty status refreshed for {changed} asset(s)")
        return changed

    # ============================================
    # READS
    # ============================================
    def today(self) -> date:
        """Evaluation day used for warranty status and removal dates."""
        return self._today()

    def get(self, asset_id: str) -> Asset:
        with self._lock:
            return self._find(asset_id)

    def list_assets(self, include_removed: bool = True) -> list:
        with self._lock:
            assets = list(self._assets.values())
        if not include_removed:
            assets = [a for a in assets if not a.is_removed]
        return assets

    def assets_for_employee(self, employee_id: str) -> list:
        if _is_blank(employee_id):
            return []
        return [a for a in self.list_assets() if a.employee_id == employee_id]

    def filter_assets(self, search: str = "", status: str = None, asset_type: str = None,
                      warranty_status: str = None, include_removed: bool = True) -> list:
        """Search (asset code, brand, model, holder, department) plus exact filters. "All" means no filter."""
        needle = (search or "").strip().lower()
        result = []
        for asset in self.list_assets(include_removed=include_removed):
            if needle:
                haystack = [asset.asset_code, asset.brand, asset.model,
                            asset.employee_name, asset.department]
                if not any(needle in (h or "").lower() for h in haystack):
                    continue
            if status and status != "All" and asset.status != status:
                continue
            if asset_type and asset_type != "All" and asset.asset_type != asset_type:
                continue
            if warranty_status and warranty_status != "All" and asset.warranty_status != warranty_status:
                continue
            result.append(asset)
        return result
