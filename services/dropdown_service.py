"""
Dropdown taxonomy — administrator-managed choice lists.
Values are trimmed and unique per category, ignoring case.
"""

import logging
import threading

from config.constants import DROPDOWN_CATEGORIES, ASSET_TAXONOMY_FIELDS
from config.permissions import validate_action
from core.errors import ValidationError, NotFoundError, PermissionDeniedError
from core.models import DropdownOption

logger = logging.getLogger("AssetTracker")


class DropdownTaxonomyStore:
    """Category -> ordered option list. Deleting a value never touches existing records."""

    def __init__(self, audit=None):
        self.audit = audit
        self._options = []
        self._counter = 0
        self._lock = threading.Lock()

    # ============================================
    # HELPERS
    # ============================================
    def _next_id(self) -> str:
        self._counter += 1
        return f"D{self._counter:03d}"

    def _authorize(self, user_role, description):
        if user_role is None:
            return
        result = validate_action("manage_dropdowns", user_role)
        if not result.success:
            if self.audit:
                self.audit.log_activity_event(
                    action_type="ACCESS_DENIED",
                    category="security",
                    user_role=user_role,
                    description=f"Unauthorized dropdown change: {description}",
                    success=False,
                    error_message=result.message,
                )
            raise PermissionDeniedError(result.message)

    def _find(self, option_id) -> DropdownOption:
        for option in self._options:
            if option.id == option_id:
                return option
        raise NotFoundError("Dropdown option", option_id)

    def _check_value(self, category, value, exclude_id=None) -> str:
        if category not in DROPDOWN_CATEGORIES:
            raise ValidationError(f"Unknown dropdown category: {category}")
        value = (value or "").strip()
        if not value:
            raise ValidationError("Option value cannot be empty")
        for option in self._options:
            if option.category == category and option.id != exclude_id \
                    and option.value.lower() == value.lower():
                raise ValidationError(f"'{value}' already exists in {DROPDOWN_CATEGORIES[category]}")
        return value

    def _audit(self, action_type, user_role, description, option, old_value=None):
        if self.audit:
            self.audit.log_activity_event(
                action_type=action_type,
                category="settings",
                user_role=user_role,
                description=description,
                entity_id=option.id,
                entity_label=option.category,
                old_value=old_value,
                new_value=option.value,
            )

    # ============================================
    # MUTATIONS
    # ============================================
    def add_option(self, category: str, value: str, user_role: str = None) -> DropdownOption:
        self._authorize(user_role, f"add {category}")
        with self._lock:
            value = self._check_value(category, value)
            option = DropdownOption(id=self._next_id(), category=category, value=value)
            self._options.append(option)
        logger.info(f"Dropdown option added: {category}={value}")
        self._audit("OPTION_ADDED", user_role, f"Added '{value}' to {category}", option)
        return option

    def update_option(self, option_id: str, value: str, user_role: str = None) -> DropdownOption:
        self._authorize(user_role, f"update {option_id}")
        with self._lock:
            option = self._find(option_id)
            value = self._check_value(option.category, value, exclude_id=option_id)
            old_value = option.value
            option.value = value
        logger.info(f"Dropdown option {option_id} renamed: {old_value} -> {value}")
        self._audit("OPTION_UPDATED", user_role, f"Renamed '{old_value}' to '{value}'", option, old_value)
        return option

    def delete_option(self, option_id: str, user_role: str = None) -> DropdownOption:
        self._authorize(user_role, f"delete {option_id}")
        with self._lock:
            option = self._find(option_id)
            self._options.remove(option)
        logger.info(f"Dropdown option deleted: {option.category}={option.value}")
        self._audit("OPTION_DELETED", user_role, f"Deleted '{option.value}' from {option.category}", option)
        return option

    # ============================================
    # READS
    # ============================================
    def get_options(self, category: str = None) -> list:
        with self._lock:
            if category is None:
                return list(self._options)
            return [o for o in self._options if o.category == category]

    def get_values(self, category: str) -> list:
        return [o.value for o in self.get_options(category)]

    def validate_choice(self, category: str, value) -> bool:
        """
        True when ``value`` is allowed for ``category``.
        Blank values and empty categories place no constraint.
        """
        if value is None or str(value).strip() == "":
            return True
        allowed = self.get_values(category)
        if not allowed:
            return True
        needle = str(value).strip().lower()
        return any(v.lower() == needle for v in allowed)

    def count_usage(self, option_id: str, assets) -> int:
        """Number of assets whose taxonomy-backed fields currently hold this option's value."""
        option = self._find(option_id)
        fields = [f for f, cat in ASSET_TAXONOMY_FIELDS.items() if cat == option.category]
        needle = option.value.lower()
        count = 0
        for asset in assets:
            if any((getattr(asset, f) or "").lower() == needle for f in fields):
                count += 1
        return count
