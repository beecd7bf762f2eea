from core.data import AssetWorkspace, assets_to_dataframe, employees_to_dataframe, ASSET_TABLE_COLUMNS


def test_empty_workspace():
    workspace = AssetWorkspace()
    assert workspace.registry.list_assets() == []
    assert workspace.directory.list_employees() == []
    assert workspace.taxonomy.get_options() == []


def test_seeded_workspace_goes_through_services(seeded):
    assert len(seeded.registry.list_assets()) == 8
    assert len(seeded.directory.list_employees()) == 6
    assert "Bangalore" in seeded.taxonomy.get_values("location")
    assert seeded.registry.get("A001").employee_name == "Rahul Sharma"
    # One audit entry per seeded record
    assert seeded.audit.get_audit_summary()["by_action"]["ASSET_CREATED"] == 8


def test_directory_guard_reads_registry(seeded):
    assert seeded.directory.asset_source is seeded.registry


def test_table_frames(seeded):
    df = assets_to_dataframe(seeded.registry.list_assets())
    assert list(df.columns) == ["id"] + list(ASSET_TABLE_COLUMNS.values())
    assert df.loc[df["Asset Code"] == "BTSPL-PRN-001", "Assigned To"].iloc[0] == ""

    empty = employees_to_dataframe([])
    assert empty.empty
    assert "Name" in empty.columns
