"""Tests for catalog module."""
import dataclasses

import pytest

from neontycoon.building import BuildingDef
from neontycoon.catalog import Catalog, default_catalog
from neontycoon.skill import SkillDef, SkillId


def test_default_catalog_contents():
    catalog = default_catalog()
    assert catalog.validate() == []
    assert catalog.building_count == 7
    assert [b.index for b in catalog.buildings] == list(range(7))
    assert catalog.buildings[0].display_name == "Data Miner"
    assert catalog.buildings[0].base_cost == 15
    assert catalog.buildings[6].income_per_sec == 8000
    assert [s.id for s in catalog.skills] == [
        SkillId.AUTO_CLICK,
        SkillId.CHEAPER,
        SkillId.OFFLINE,
        SkillId.HACK_FREQ,
    ]


def test_get_building():
    catalog = default_catalog()
    assert catalog.get_building(1).display_name == "Bot Network"
    assert catalog.get_building(-1) is None
    assert catalog.get_building(7) is None
    assert catalog.get_building(True) is None


def test_get_skill_by_enum_and_string():
    catalog = default_catalog()
    assert catalog.get_skill(SkillId.CHEAPER).cost == 10
    assert catalog.get_skill("offline").display_name == "Deep Sleep"
    assert catalog.get_skill("teleport") is None


def test_get_skill_missing_from_catalog():
    catalog = Catalog(skills=(SkillDef(SkillId.AUTO_CLICK, cost=5),))
    assert catalog.get_skill(SkillId.CHEAPER) is None


def test_from_records_indexes_in_order():
    catalog = Catalog.from_records(
        buildings=[
            {"name": "A", "base_cost": 1, "income": 1},
            {"name": "B", "base_cost": 2},
        ],
    )
    assert [b.index for b in catalog.buildings] == [0, 1]
    assert catalog.buildings[1].income_per_sec == 0.0
    assert catalog.skills == ()


def test_from_records_rejects_unknown_skill():
    with pytest.raises(ValueError, match="Unknown skill id"):
        Catalog.from_records(skills=[{"id": "teleport", "cost": 3}])


def test_catalog_is_immutable():
    catalog = default_catalog()
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.buildings = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.buildings[0].base_cost = 1


def test_validate_errors():
    catalog = Catalog(
        buildings=(
            BuildingDef(0, "ok", base_cost=10),
            BuildingDef(5, "gap", base_cost=10),
            BuildingDef(2, "free", base_cost=0, income_per_sec=-1),
        ),
        skills=(
            SkillDef(SkillId.CHEAPER, cost=1),
            SkillDef(SkillId.CHEAPER, cost=-2),
        ),
    )
    errors = catalog.validate()
    assert any("index 5, expected 1" in e for e in errors)
    assert any("positive base_cost" in e for e in errors)
    assert any("negative income_per_sec" in e for e in errors)
    assert any("Duplicate skill ID" in e for e in errors)
    assert any("negative cost" in e for e in errors)


def test_display_name_defaults():
    assert BuildingDef(3, base_cost=1).display_name == "building_3"
    assert SkillDef(SkillId.OFFLINE).display_name == "offline"


def test_skill_id_parse():
    assert SkillId.parse("auto_click") is SkillId.AUTO_CLICK
    assert SkillId.parse(SkillId.CHEAPER) is SkillId.CHEAPER
    with pytest.raises(ValueError):
        SkillId.parse("AUTO_CLICK")


def test_skill_def_parses_string_id():
    sdef = SkillDef("auto_click", cost=5)
    assert sdef.id is SkillId.AUTO_CLICK
    assert sdef.display_name == "auto_click"


def test_skill_def_rejects_unknown_id():
    with pytest.raises(ValueError, match="Unknown skill id"):
        SkillDef("teleport")
