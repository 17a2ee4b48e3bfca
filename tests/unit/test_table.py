import pytest

from sprite_atlas.errors import ConfigurationError
from sprite_atlas.table import AtlasCatalog, freeze_table
from tests.test_utils import make_group_catalog, make_scenario_table


def test_freeze_table_is_a_snapshot() -> None:
    raw = make_scenario_table()
    table = freeze_table(raw)
    raw["hero_walk"]["url"] = "changed.png"
    raw["new_sprite"] = {"url": "c.png", "x": 0, "y": 0, "w": 1, "h": 1}
    assert table["hero_walk"]["url"] == "a.png"
    assert "new_sprite" not in table


def test_catalog_resolves_group_case_insensitively() -> None:
    catalog = make_group_catalog()
    assert set(catalog.table_for_group("HERO")) == {"hero_walk", "hero_jump"}
    assert set(catalog.table_for_group("Hero")) == {"hero_walk", "hero_jump"}


def test_catalog_unknown_group_is_configuration_error() -> None:
    catalog = make_group_catalog()
    with pytest.raises(ConfigurationError):
        catalog.table_for_group("boss")


def test_catalog_from_tables_normalizes_names() -> None:
    catalog = AtlasCatalog.from_tables(
        {"sprite_hero": {"hero_walk": {"url": "a.png"}}}, prefix="SPRITE_"
    )
    assert "hero_walk" in catalog.table_for_group("hero")


def test_catalog_group_ids_and_merged() -> None:
    catalog = make_group_catalog()
    assert list(catalog.group_ids()) == ["ENEMY", "HERO"]
    assert set(catalog.merged()) == {"hero_walk", "hero_jump", "enemy_idle"}


def test_merged_skips_tables_outside_the_prefix() -> None:
    catalog = AtlasCatalog.from_tables(
        {
            "SPRITE_HERO": {"hero_walk": {"url": "a.png"}},
            "OTHER": {"junk": {"url": "j.png"}},
        }
    )
    assert list(catalog.group_ids()) == ["HERO"]
    assert set(catalog.merged()) == {"hero_walk"}


def test_from_tables_rejects_names_differing_only_in_case() -> None:
    with pytest.raises(ConfigurationError):
        AtlasCatalog.from_tables(
            {
                "sprite_hero": {"a": {"url": "a.png"}},
                "SPRITE_HERO": {"b": {"url": "b.png"}},
            }
        )


def test_from_groups_rejects_groups_differing_only_in_case() -> None:
    with pytest.raises(ConfigurationError):
        AtlasCatalog.from_groups(
            {"hero": {"a": {"url": "a.png"}}, "Hero": {"b": {"url": "b.png"}}}
        )
