from __future__ import annotations

from typing import TYPE_CHECKING

from neontycoon.skill import SkillId

if TYPE_CHECKING:
    from neontycoon.catalog import Catalog
    from neontycoon.config import EngineConfig
    from neontycoon.state import EngineState


class IncomePipeline:
    """Computes passive income and click value from owned state."""

    def __init__(self, config: EngineConfig) -> None:
        self.config = config

    def compute_rate(self, catalog: Catalog, state: EngineState) -> float:
        """Income per second for the current buildings, skills and multiplier.

        The auto-click bonus is a flat percentage on the summed base income,
        not applied per building.
        """
        base = 0.0
        for bdef in catalog.buildings:
            base += bdef.income_per_sec * state.building_count(bdef.index)

        if state.has_skill(SkillId.AUTO_CLICK):
            base *= 1.0 + self.config.auto_click_bonus

        return base * state.income_multiplier

    def compute_click_value(self, rate: float) -> float:
        return self.config.click_base_value + self.config.click_income_share * rate
