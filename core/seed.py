"""
Demo data loaded into a fresh workspace.
Everything goes through the normal service calls, so the seed is validated
like user input and warranty statuses are derived for the current day.
"""

import logging

logger = logging.getLogger("AssetTracker")

DEMO_EMPLOYEES = [
    {"emp_no": "BTSPL001", "display_name": "Rahul Sharma", "email": "rahul.sharma@btspl.com",
     "employee_type": "Permanent", "department": "Engineering", "sub_function": "Development"},
    {"emp_no": "BTSPL002", "display_name": "Priya Patel", "email": "priya.patel@btspl.com",
     "employee_type": "Permanent", "department": "HR", "sub_function": "Recruitment"},
    {"emp_no": "BTSPL003", "display_name": "Amit Kumar", "email": "amit.kumar@btspl.com",
     "employee_type": "Contractual", "department": "IT", "sub_function": "Support"},
    {"emp_no": "BTSPL004", "display_name": "Sneha Reddy", "email": "sneha.reddy@btspl.com",
     "employee_type": "Permanent", "department": "Finance", "sub_function": "Accounts"},
    {"emp_no": "BTSPL005", "display_name": "Vikram Singh", "email": "vikram.singh@btspl.com",
     "employee_type": "Permanent", "department": "Engineering", "sub_function": "QA"},
    {"emp_no": "BTSPL006", "display_name": "Anita Desai", "email": "anita.desai@btspl.com",
     "employee_type": "Contractual", "department": "Marketing", "sub_function": "Digital"},
]

DEMO_ASSETS = [
    {
        "asset_code": "BTSPL-LPT-001", "asset_type": "Laptop", "department": "Engineering",
        "status": "Active", "brand": "Dell", "model": "Latitude 5520", "serial_no": "DL5520-001",
        "host_name": "BTSPL-DEV-001", "brief_config": "i7, 16GB RAM, 512GB SSD",
        "ownership": "Owned", "purchase_vendor": "Dell India", "date_of_purchase": "2023-06-15",
        "purchase_price": 95000, "current_value": 76000, "depreciation_rate": 20,
        "warranty_end_date": "2026-06-15", "warranty_type": "Warranty",
        "employee_id": "E001", "primary_location": "Bangalore", "user_department": "Engineering",
        "sub_function": "Development", "assigned_date": "2023-06-20", "physically_verified": "2024-12-01",
    },
    {
        "asset_code": "BTSPL-LPT-002", "asset_type": "Laptop", "department": "HR",
        "status": "Active", "brand": "HP", "model": "EliteBook 840", "serial_no": "HP840-002",
        "host_name": "BTSPL-HR-001", "brief_config": "i5, 8GB RAM, 256GB SSD",
        "ownership": "Owned", "purchase_vendor": "HP India", "date_of_purchase": "2022-03-10",
        "purchase_price": 75000, "current_value": 45000, "depreciation_rate": 20,
        "warranty_end_date": "2025-03-10", "warranty_type": "Warranty",
        "employee_id": "E002", "primary_location": "Mumbai", "user_department": "HR",
        "sub_function": "Recruitment", "assigned_date": "2022-03-15", "physically_verified": "2024-11-15",
    },
    {
        "asset_code": "BTSPL-DSK-001", "asset_type": "Desktop", "department": "IT",
        "status": "Active", "action": "Upgrade Required", "brand": "Lenovo", "model": "ThinkCentre M920",
        "serial_no": "LEN920-003", "host_name": "BTSPL-IT-001", "brief_config": "i5, 8GB RAM, 1TB HDD",
        "ownership": "Owned", "purchase_vendor": "Lenovo India", "date_of_purchase": "2021-01-20",
        "purchase_price": 55000, "current_value": 22000, "depreciation_rate": 20,
        "warranty_end_date": "2024-01-20", "warranty_type": "AMC",
        "amc_start_date": "2024-01-21", "amc_end_date": "2025-01-20",
        "employee_id": "E003", "primary_location": "Bangalore", "user_department": "IT",
        "sub_function": "Support", "assigned_date": "2021-02-01", "physically_verified": "2024-10-20",
    },
    {
        "asset_code": "BTSPL-MON-001", "asset_type": "Monitor", "department": "Finance",
        "status": "Active", "brand": "Samsung", "model": '27" LED', "serial_no": "SAM27-004",
        "host_name": "N/A", "brief_config": "27 inch, Full HD, IPS",
        "ownership": "Owned", "purchase_vendor": "Amazon Business", "date_of_purchase": "2023-09-05",
        "purchase_price": 18000, "current_value": 14400, "depreciation_rate": 20,
        "warranty_end_date": "2026-09-05", "warranty_type": "Warranty",
        "employee_id": "E004", "primary_location": "Hyderabad", "user_department": "Finance",
        "sub_function": "Accounts", "assigned_date": "2023-09-10", "physically_verified": "2024-12-05",
    },
    {
        "asset_code": "BTSPL-LPT-003", "asset_type": "Laptop", "department": "Engineering",
        "status": "Inactive", "action": "Repair", "brand": "Dell", "model": "Inspiron 15",
        "serial_no": "DLI15-005", "host_name": "BTSPL-DEV-002", "brief_config": "i5, 8GB RAM, 256GB SSD",
        "ownership": "Leased", "lease_contract_code": "LC-2020-001", "purchase_vendor": "Dell India",
        "date_of_purchase": "2020-08-12", "purchase_price": 65000, "current_value": 13000,
        "depreciation_rate": 20, "warranty_end_date": "2023-08-12", "warranty_type": "Non-Warranty",
        "primary_location": "Bangalore", "user_department": "Engineering", "sub_function": "QA",
        "physically_verified": "2024-09-01", "asset_remark": "Screen damaged, sent for repair",
    },
    {
        "asset_code": "BTSPL-PRN-001", "asset_type": "Printer", "department": "Admin",
        "status": "Active", "brand": "Canon", "model": "imageCLASS MF244dw", "serial_no": "CAN244-006",
        "host_name": "BTSPL-PRN-001", "brief_config": "All-in-one Laser Printer",
        "ownership": "Owned", "purchase_vendor": "Canon India", "date_of_purchase": "2022-11-30",
        "purchase_price": 28000, "current_value": 16800, "depreciation_rate": 20,
        "warranty_end_date": "2024-11-30", "warranty_type": "AMC",
        "amc_start_date": "2024-12-01", "amc_end_date": "2025-11-30",
        "primary_location": "Mumbai", "user_department": "Admin", "physically_verified": "2024-12-01",
    },
    {
        "asset_code": "BTSPL-KBM-001", "asset_type": "Keyboard + Mouse Combo", "department": "Marketing",
        "status": "Reserved", "brand": "Logitech", "model": "MK270", "serial_no": "LOG270-007",
        "host_name": "N/A", "brief_config": "Wireless Keyboard + Mouse",
        "ownership": "Owned", "purchase_vendor": "Flipkart Business", "date_of_purchase": "2024-01-10",
        "purchase_price": 2500, "current_value": 2000, "depreciation_rate": 20,
        "warranty_end_date": "2025-01-10", "warranty_type": "Warranty",
        "primary_location": "Delhi", "user_department": "Marketing", "physically_verified": "2024-11-20",
        "asset_remark": "Reserved for new joinee",
    },
    {
        "asset_code": "BTSPL-HDP-001", "asset_type": "Headphone", "department": "Engineering",
        "status": "Active", "brand": "Jabra", "model": "Evolve2 75", "serial_no": "JAB75-008",
        "host_name": "N/A", "brief_config": "Wireless, ANC, UC Certified",
        "ownership": "Owned", "purchase_vendor": "Amazon Business", "date_of_purchase": "2024-06-20",
        "purchase_price": 32000, "current_value": 28800, "depreciation_rate": 10,
        "warranty_end_date": "2026-06-20", "warranty_type": "Warranty",
        "employee_id": "E005", "primary_location": "Bangalore", "user_department": "Engineering",
        "sub_function": "QA", "assigned_date": "2024-06-22", "physically_verified": "2024-12-05",
    },
]

DEMO_DROPDOWN_OPTIONS = {
    "assetCode": ["BTSPL-LPT", "BTSPL-DSK", "BTSPL-MON", "BTSPL-PRN", "BTSPL-KBM", "BTSPL-HDP"],
    "assetType": ["Laptop", "Desktop", "Monitor", "Printer", "Keyboard", "Mouse", "Headphone",
                  "Keyboard + Mouse Combo"],
    "brand": ["Dell", "HP", "Lenovo", "Samsung", "Canon", "Logitech", "Jabra", "Apple", "Asus", "Acer"],
    "model": ["Latitude 5520", "EliteBook 840", "ThinkCentre M920", "Inspiron 15", "MacBook Pro 14",
              "ThinkPad X1 Carbon"],
    "purchaseVendor": ["Dell India", "HP India", "Lenovo India", "Amazon Business", "Flipkart Business",
                       "Canon India", "Ingram Micro"],
    "action": ["Repair", "Replace", "Upgrade Required", "Dispose", "Return to Vendor", "Under Maintenance"],
    "department": ["Engineering", "HR", "IT", "Finance", "Admin", "Marketing", "Sales", "Operations"],
    "location": ["Bangalore", "Mumbai", "Hyderabad", "Delhi", "Chennai", "Pune"],
    "subFunction": ["Development", "QA", "DevOps", "Support", "Recruitment", "Accounts", "Digital", "Payroll"],
}


def seed_workspace(taxonomy, directory, registry):
    """Load the demo options, employees and assets, in that order."""
    for category, values in DEMO_DROPDOWN_OPTIONS.items():
        for value in values:
            taxonomy.add_option(category, value)
    for employee in DEMO_EMPLOYEES:
        directory.create(employee)
    for asset in DEMO_ASSETS:
        registry.create(asset)
    logger.info(
        f"Demo data loaded: {len(DEMO_EMPLOYEES)} employees, {len(DEMO_ASSETS)} assets"
    )
