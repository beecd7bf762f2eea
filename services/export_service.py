"""
Export / import utilities — CSV for the list screens, styled Excel workbook for assets.
"""

from io import BytesIO, StringIO
from datetime import date

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side

from config.constants import ASSET_EXPORT_COLUMNS, EMPLOYEE_EXPORT_COLUMNS

# Export header -> record attribute
ASSET_COLUMN_FIELDS = {
    "Asset Code": "asset_code",
    "Type": "asset_type",
    "Brand": "brand",
    "Model": "model",
    "Status": "status",
    "Assigned To": "employee_name",
    "Department": "department",
    "Warranty Status": "warranty_status",
}

EMPLOYEE_COLUMN_FIELDS = {
    "Emp No": "emp_no",
    "Name": "display_name",
    "Email": "email",
    "Type": "employee_type",
    "Department": "department",
    "Sub-Function": "sub_function",
}

# Wider sheet for the Excel export
EXCEL_ASSET_COLUMNS = [
    ("S.No", "s_no"),
    ("Asset Code", "asset_code"),
    ("Type", "asset_type"),
    ("Brand", "brand"),
    ("Model", "model"),
    ("Serial No", "serial_no"),
    ("Host Name", "host_name"),
    ("Status", "status"),
    ("Ownership", "ownership"),
    ("Vendor", "purchase_vendor"),
    ("Date of Purchase", "date_of_purchase"),
    ("Purchase Price", "purchase_price"),
    ("Current Value", "current_value"),
    ("Warranty End", "warranty_end_date"),
    ("Warranty Type", "warranty_type"),
    ("Warranty Status", "warranty_status"),
    ("Assigned To", "employee_name"),
    ("Department", "department"),
    ("Location", "primary_location"),
]

# Styling constants
HEADER_FILL = PatternFill(start_color="2563EB", end_color="2563EB", fill_type="solid")
HEADER_FONT = Font(bold=True, color="FFFFFF", size=11)
HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center", wrap_text=True)
CELL_BORDER = Border(
    left=Side(style='thin', color='D1D5DB'),
    right=Side(style='thin', color='D1D5DB'),
    top=Side(style='thin', color='D1D5DB'),
    bottom=Side(style='thin', color='D1D5DB')
)


def _frame(records, column_fields: dict, columns: list) -> pd.DataFrame:
    rows = [
        {header: getattr(record, column_fields[header]) or "" for header in columns}
        for record in records
    ]
    return pd.DataFrame(rows, columns=columns)


def assets_to_csv(assets) -> str:
    """Header row first. Values containing commas or quotes are quoted."""
    df = _frame(assets, ASSET_COLUMN_FIELDS, ASSET_EXPORT_COLUMNS)
    return df.to_csv(index=False, lineterminator="\n")


def employees_to_csv(employees) -> str:
    df = _frame(employees, EMPLOYEE_COLUMN_FIELDS, EMPLOYEE_EXPORT_COLUMNS)
    return df.to_csv(index=False, lineterminator="\n")


def parse_csv(text: str) -> list:
    """Read exported CSV back into one dict per row, keyed by header. Every value is a string."""
    if not text or not text.strip():
        return []
    df = pd.read_csv(StringIO(text), dtype=str, keep_default_na=False)
    return df.to_dict(orient="records")


def export_filename(prefix: str, today: date = None) -> str:
    return f"{prefix}-export-{(today or date.today()).isoformat()}.csv"


def export_assets_to_excel(assets) -> BytesIO:
    """
    Export assets to a formatted Excel file.

    Args:
        assets: iterable of Asset

    Returns:
        BytesIO buffer containing the Excel file
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Assets"

    headers = [header for header, _ in EXCEL_ASSET_COLUMNS]

    # Write header row
    for col_idx, col_name in enumerate(headers, 1):
        cell = ws.cell(row=1, column=col_idx, value=col_name)
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT
        cell.alignment = HEADER_ALIGNMENT
        cell.border = CELL_BORDER

    # Write data rows
    row_count = 0
    for row_idx, asset in enumerate(assets, 2):
        row_count += 1
        for col_idx, (_, field_name) in enumerate(EXCEL_ASSET_COLUMNS, 1):
            cell = ws.cell(row=row_idx, column=col_idx, value=getattr(asset, field_name))
            cell.border = CELL_BORDER
            cell.alignment = Alignment(vertical="center")

    # Auto-adjust column widths
    for col_idx, col_name in enumerate(headers, 1):
        max_length = len(str(col_name))
        for row_idx in range(2, row_count + 2):
            cell_value = ws.cell(row=row_idx, column=col_idx).value
            if cell_value:
                max_length = max(max_length, len(str(cell_value)))
        ws.column_dimensions[ws.cell(row=1, column=col_idx).column_letter].width = min(max_length + 2, 50)

    # Freeze header row
    ws.freeze_panes = "A2"

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
