"""Record types shared by the services and the views."""

from dataclasses import dataclass, field, asdict, fields
from datetime import date, datetime
from typing import Optional


def parse_date(value) -> Optional[date]:
    """Accept a date, datetime, ISO string or blank and return a date (or None)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value).strip()[:10], "%Y-%m-%d").date()


@dataclass
class Asset:
    """A tracked physical IT item."""

    id: str
    s_no: int
    asset_code: str
    asset_type: str
    department: str
    status: str
    brand: str
    model: str
    serial_no: str
    host_name: str
    brief_config: str
    ownership: str
    purchase_vendor: str
    date_of_purchase: date
    warranty_end_date: date
    warranty_type: str
    warranty_status: str
    primary_location: str
    user_department: str
    created_at: datetime
    updated_at: datetime
    action: Optional[str] = None
    purchase_price: Optional[float] = None
    current_value: Optional[float] = None
    depreciation_rate: Optional[float] = None
    lease_contract_code: Optional[str] = None
    amc_start_date: Optional[date] = None
    amc_end_date: Optional[date] = None
    employee_id: Optional[str] = None
    employee_name: Optional[str] = None
    employee_email: Optional[str] = None
    employee_type: Optional[str] = None
    sub_function: Optional[str] = None
    assigned_date: Optional[date] = None
    physically_verified: Optional[date] = None
    asset_remark: Optional[str] = None
    removed_date: Optional[date] = None
    removal_reason: Optional[str] = None

    @property
    def is_removed(self) -> bool:
        return self.status == "Removed"

    @property
    def is_assigned(self) -> bool:
        return bool(self.employee_id)

    def to_dict(self) -> dict:
        return asdict(self)


ASSET_FIELDS = tuple(f.name for f in fields(Asset))
ASSET_DATE_FIELDS = (
    "date_of_purchase", "warranty_end_date", "amc_start_date", "amc_end_date",
    "assigned_date", "physically_verified", "removed_date",
)
ASSET_MONEY_FIELDS = ("purchase_price", "current_value", "depreciation_rate")


@dataclass
class Employee:
    """A person who may hold assets."""

    id: str
    emp_no: str
    display_name: str
    email: str
    employee_type: str
    department: str
    sub_function: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


EMPLOYEE_FIELDS = tuple(f.name for f in fields(Employee))


@dataclass
class DropdownOption:
    id: str
    category: str
    value: str


@dataclass
class Principal:
    """The signed-in user and the role used for permission checks."""

    id: str
    username: str
    display_name: str
    email: str
    role: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Principal":
        return cls(
            id=str(data["id"]),
            username=data["username"],
            display_name=data.get("display_name", data["username"]),
            email=data.get("email", ""),
            role=data["role"],
        )


@dataclass
class DashboardStats:
    """Aggregates shown on the dashboard. Built by calculate_dashboard_stats."""

    total_assets: int = 0
    active_assets: int = 0
    inactive_assets: int = 0
    reserved_assets: int = 0
    removed_assets: int = 0
    under_warranty: int = 0
    expired_warranty: int = 0
    expiring_warranty: int = 0
    requires_action: int = 0
    assigned_assets: int = 0
    unassigned_assets: int = 0
    total_asset_value: float = 0
    total_purchase_value: float = 0
    total_depreciation: float = 0
    assets_by_type: list = field(default_factory=list)
    assets_by_department: list = field(default_factory=list)
    assets_by_status: list = field(default_factory=list)
    assets_by_ownership: list = field(default_factory=list)
    assets_by_location: list = field(default_factory=list)
