import pytest

from bundlecache import DEFAULT_RENAMES, IndexSettings, RenameTable, normalize_name
from bundlecache.names import strip_mesh_id_suffix


def test_normalize_name_case_folds():
    assert normalize_name("Barrel_01") == "barrel_01"
    assert normalize_name("STRASSE") == normalize_name("straße")


def test_rename_table_normalizes_both_sides():
    table = RenameTable({"Old_Name": "New_Name"})

    assert table.get("OLD_NAME") == "new_name"
    assert "old_name" in table
    assert table.get("new_name") is None
    assert list(table) == ["old_name"]


def test_rename_table_is_immutable():
    source = {"a": "b"}
    table = RenameTable(source)
    source["c"] = "d"

    assert len(table) == 1
    with pytest.raises(TypeError):
        table["c"] = "d"


def test_rename_table_equality():
    assert RenameTable({"A": "b"}) == RenameTable([("a", "B")])
    assert RenameTable.empty() == RenameTable()
    assert len(RenameTable.empty()) == 0


def test_default_renames():
    assert DEFAULT_RENAMES.get("vfx_exh_shock_p3_s1_0") == "shock_1_pt3"
    assert len(DEFAULT_RENAMES) == 6


@pytest.mark.parametrize(
    "name, expected",
    [
        ("barrel_1", "barrel"),
        ("chair_01", "chair_"),
        ("ab_", "a"),
        ("_1", None),
        ("x", None),
        ("", None),
    ],
)
def test_strip_mesh_id_suffix(name, expected):
    assert strip_mesh_id_suffix(name) == expected


def test_strip_mesh_id_suffix_rejects_bad_length():
    with pytest.raises(ValueError):
        strip_mesh_id_suffix("barrel_1", 0)


def test_settings_defaults():
    settings = IndexSettings()

    assert settings.renames is DEFAULT_RENAMES
    assert settings.max_rename_hops == 8
    assert settings.mesh_id_suffix_length == 2


def test_settings_validation():
    with pytest.raises(ValueError):
        IndexSettings(max_rename_hops=-1)
    with pytest.raises(ValueError):
        IndexSettings(mesh_id_suffix_length=0)


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("BUNDLECACHE_MAX_RENAME_HOPS", "3")
    monkeypatch.setenv("BUNDLECACHE_MESH_ID_SUFFIX_LENGTH", "4")

    settings = IndexSettings.from_env(renames=RenameTable.empty())

    assert settings.max_rename_hops == 3
    assert settings.mesh_id_suffix_length == 4
    assert len(settings.renames) == 0
