"""
Centralized configuration constants for the IT Asset Tracker.
Pure data, no runtime dependencies.
"""

# ============================================
# ROLE-BASED CONFIGURATION
# ============================================
USER_ROLES = {
    "admin": {
        "name": "Admin",
        "description": "Full system access",
    },
    "hr": {
        "name": "HR",
        "description": "Employee records and asset visibility",
    },
    "director": {
        "name": "Director",
        "description": "Read-only overview",
    },
}

# Primary page per role - visually emphasized in sidebar
ROLE_PRIMARY_ACTION = {
    "admin": "Dashboard",
    "hr": "Employees",
    "director": "Dashboard",
}

# ============================================
# ASSET ENUMERATIONS
# ============================================
ASSET_TYPES = [
    "Laptop",
    "Desktop",
    "Printer",
    "Keyboard",
    "Mouse",
    "Headphone",
    "Monitor",
    "Keyboard + Mouse Combo",
]

ASSET_STATUSES = ["Active", "Inactive", "Reserved", "Removed"]

# Statuses selectable in the asset form; Removed is reached only via removal
EDITABLE_STATUSES = ["Active", "Inactive", "Reserved"]

OWNERSHIP_TYPES = ["Owned", "Leased"]

WARRANTY_TYPES = ["Warranty", "AMC", "Non-Warranty"]

WARRANTY_STATUSES = ["Active", "Expired", "Expiring Soon"]

EMPLOYEE_TYPES = ["Permanent", "Contractual"]

# Assets whose warranty ends within this many days are "Expiring Soon"
WARRANTY_EXPIRING_DAYS = 30

# ============================================
# DROPDOWN TAXONOMY
# ============================================
DROPDOWN_CATEGORIES = {
    "assetCode": "Asset Codes",
    "assetType": "Asset Types",
    "action": "Actions",
    "brand": "Brands",
    "model": "Models",
    "serialNo": "Serial Numbers",
    "hostName": "Host Names",
    "briefConfig": "Configurations",
    "purchaseVendor": "Purchase Vendors",
    "department": "Departments",
    "location": "Locations",
    "subFunction": "Sub Functions",
}

# Record field -> taxonomy category checked at input time
ASSET_TAXONOMY_FIELDS = {
    "action": "action",
    "brand": "brand",
    "purchase_vendor": "purchaseVendor",
    "primary_location": "location",
    "user_department": "department",
    "sub_function": "subFunction",
}

EMPLOYEE_TAXONOMY_FIELDS = {
    "department": "department",
    "sub_function": "subFunction",
}

# ============================================
# DISPLAY COLORS
# ============================================
STATUS_COLORS = {
    "Active": "#10B981",
    "Inactive": "#EF4444",
    "Reserved": "#F59E0B",
    "Removed": "#64748B",
}

WARRANTY_COLORS = {
    "Active": "#10B981",
    "Expiring Soon": "#F59E0B",
    "Expired": "#EF4444",
}

# ============================================
# EXPORT COLUMNS
# ============================================
ASSET_EXPORT_COLUMNS = [
    "Asset Code", "Type", "Brand", "Model", "Status",
    "Assigned To", "Department", "Warranty Status",
]

EMPLOYEE_EXPORT_COLUMNS = [
    "Emp No", "Name", "Email", "Type", "Department", "Sub-Function",
]

# ============================================
# PERFORMANCE & PAGINATION CONFIGURATION
# ============================================
PAGINATION_CONFIG = {
    "default_page_size": 25,
    "page_size_options": [10, 25, 50, 100],
}

# Session activity log cap
AUDIT_LOG_LIMIT = 500

# Actions that require enhanced audit logging
CRITICAL_ACTIONS = {
    "ASSET_CREATED": {"severity": "medium"},
    "ASSET_UPDATED": {"severity": "low"},
    "ASSET_ASSIGNED": {"severity": "high"},
    "ASSET_REMOVED": {"severity": "high"},
    "ASSET_DELETED": {"severity": "critical"},
    "EMPLOYEE_CREATED": {"severity": "low"},
    "EMPLOYEE_UPDATED": {"severity": "low"},
    "EMPLOYEE_DELETED": {"severity": "high"},
    "OPTION_ADDED": {"severity": "low"},
    "OPTION_UPDATED": {"severity": "low"},
    "OPTION_DELETED": {"severity": "medium"},
    "ACCESS_DENIED": {"severity": "critical"},
    "USER_LOGIN": {"severity": "low"},
    "USER_LOGOUT": {"severity": "low"},
}
