from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from neontycoon.skill import SkillId

if TYPE_CHECKING:
    from neontycoon.catalog import Catalog


@dataclass
class EngineState:
    """Mutable runtime container holding one player's economy."""

    balance: float = 0.0
    prestige_currency: int = 0
    building_counts: list[int] = field(default_factory=list)
    owned_skills: set[SkillId] = field(default_factory=set)
    income_multiplier: float = 1.0
    income_per_sec: float = 0.0

    # Lifetime statistics, never reset
    total_clicks: int = 0
    total_earnings: float = 0.0
    prestige_count: int = 0

    @classmethod
    def for_catalog(cls, catalog: Catalog) -> EngineState:
        return cls(building_counts=[0] * catalog.building_count)

    def building_count(self, index: int) -> int:
        if 0 <= index < len(self.building_counts):
            return self.building_counts[index]
        return 0

    def has_skill(self, skill_id: SkillId) -> bool:
        return skill_id in self.owned_skills

    def earn(self, amount: float) -> None:
        self.balance += amount
        self.total_earnings += amount
