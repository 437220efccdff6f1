"""Tests for state module."""
from neontycoon.catalog import default_catalog
from neontycoon.skill import SkillId
from neontycoon.state import EngineState


def test_initialization():
    state = EngineState.for_catalog(default_catalog())
    assert state.balance == 0.0
    assert state.prestige_currency == 0
    assert state.building_counts == [0] * 7
    assert state.owned_skills == set()
    assert state.income_multiplier == 1.0
    assert state.total_clicks == 0
    assert state.total_earnings == 0.0
    assert state.prestige_count == 0


def test_building_count():
    state = EngineState(building_counts=[0, 3])
    assert state.building_count(1) == 3
    assert state.building_count(2) == 0
    assert state.building_count(-1) == 0


def test_has_skill():
    state = EngineState()
    assert not state.has_skill(SkillId.CHEAPER)
    state.owned_skills.add(SkillId.CHEAPER)
    assert state.has_skill(SkillId.CHEAPER)


def test_earn_updates_lifetime_earnings():
    state = EngineState(balance=10.0)
    state.earn(5.0)
    assert state.balance == 15.0
    assert state.total_earnings == 5.0
