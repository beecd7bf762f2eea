from datetime import date

from openpyxl import load_workbook

from config.constants import ASSET_EXPORT_COLUMNS, EMPLOYEE_EXPORT_COLUMNS
from services.export_service import (
    assets_to_csv, employees_to_csv, parse_csv, export_filename, export_assets_to_excel,
)


def test_asset_csv_header_and_rows(seeded):
    text = assets_to_csv(seeded.registry.list_assets())
    lines = text.strip().split("\n")
    assert lines[0] == ",".join(ASSET_EXPORT_COLUMNS)
    assert len(lines) == 9


def test_csv_quotes_awkward_values_and_parses_back(seeded):
    assets = seeded.registry.list_assets()
    rows = parse_csv(assets_to_csv(assets))

    monitor = next(r for r in rows if r["Asset Code"] == "BTSPL-MON-001")
    assert monitor["Model"] == '27" LED'
    assert monitor["Assigned To"] == "Sneha Reddy"

    unassigned = next(r for r in rows if r["Asset Code"] == "BTSPL-PRN-001")
    assert unassigned["Assigned To"] == ""


def test_employee_csv(seeded):
    rows = parse_csv(employees_to_csv(seeded.directory.list_employees()))
    assert list(rows[0]) == EMPLOYEE_EXPORT_COLUMNS
    assert [r["Emp No"] for r in rows][:2] == ["BTSPL001", "BTSPL002"]


def test_empty_exports():
    assert parse_csv("") == []
    assert assets_to_csv([]).strip() == ",".join(ASSET_EXPORT_COLUMNS)


def test_export_filename():
    assert export_filename("assets", date(2025, 1, 1)) == "assets-export-2025-01-01.csv"


def test_excel_export(seeded):
    workbook = load_workbook(export_assets_to_excel(seeded.registry.list_assets()))
    sheet = workbook["Assets"]
    assert sheet["A1"].value == "S.No"
    assert sheet["B2"].value == "BTSPL-LPT-001"
    assert sheet.max_row == 9
