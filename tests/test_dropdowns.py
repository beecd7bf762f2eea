import pytest

from core.errors import ValidationError, NotFoundError, PermissionDeniedError


def _option(taxonomy, category, value):
    return next(o for o in taxonomy.get_options(category) if o.value == value)


def test_add_trims_and_orders(workspace):
    taxonomy = workspace.taxonomy
    first = taxonomy.add_option("location", "  Pune ")
    taxonomy.add_option("location", "Chennai")
    assert first.id == "D001"
    assert taxonomy.get_values("location") == ["Pune", "Chennai"]
    assert taxonomy.get_values("brand") == []


@pytest.mark.parametrize("category, value", [
    ("location", ""),
    ("location", "   "),
    ("planet", "Mars"),
])
def test_add_rejects_blank_or_unknown_category(workspace, category, value):
    with pytest.raises(ValidationError):
        workspace.taxonomy.add_option(category, value)


def test_duplicates_rejected_ignoring_case(workspace):
    taxonomy = workspace.taxonomy
    taxonomy.add_option("brand", "Dell")
    with pytest.raises(ValidationError):
        taxonomy.add_option("brand", "DELL")
    # Same value in another category is fine
    taxonomy.add_option("purchaseVendor", "Dell")


def test_update_and_delete(workspace):
    taxonomy = workspace.taxonomy
    hp = taxonomy.add_option("brand", "HP")
    taxonomy.add_option("brand", "Dell")

    taxonomy.update_option(hp.id, "Hewlett Packard")
    assert taxonomy.get_values("brand") == ["Hewlett Packard", "Dell"]
    with pytest.raises(ValidationError):
        taxonomy.update_option(hp.id, "dell")

    deleted = taxonomy.delete_option(hp.id)
    assert deleted.value == "Hewlett Packard"
    assert taxonomy.get_values("brand") == ["Dell"]
    with pytest.raises(NotFoundError):
        taxonomy.delete_option(hp.id)


def test_validate_choice(workspace):
    taxonomy = workspace.taxonomy
    assert taxonomy.validate_choice("brand", "Anything")
    taxonomy.add_option("brand", "Dell")
    assert taxonomy.validate_choice("brand", "dell")
    assert taxonomy.validate_choice("brand", "")
    assert taxonomy.validate_choice("brand", None)
    assert not taxonomy.validate_choice("brand", "Acme")


def test_count_usage_and_permissive_delete(seeded):
    taxonomy = seeded.taxonomy
    assets = seeded.registry.list_assets()
    dell = _option(taxonomy, "brand", "Dell")
    assert taxonomy.count_usage(dell.id, assets) == 2
    assert taxonomy.count_usage(_option(taxonomy, "location", "Bangalore").id, assets) == 4
    assert taxonomy.count_usage(_option(taxonomy, "department", "Engineering").id, assets) == 3

    taxonomy.delete_option(dell.id)
    assert "Dell" not in taxonomy.get_values("brand")
    assert seeded.registry.get("A001").brand == "Dell"


def test_only_admin_manages_options(workspace):
    taxonomy = workspace.taxonomy
    with pytest.raises(PermissionDeniedError):
        taxonomy.add_option("brand", "Dell", user_role="hr")
    option = taxonomy.add_option("brand", "Dell", user_role="admin")
    assert workspace.audit.entries(category="settings")[0]["action_type"] == "OPTION_ADDED"
    with pytest.raises(PermissionDeniedError):
        taxonomy.delete_option(option.id, user_role="director")
