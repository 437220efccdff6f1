from __future__ import annotations

import math

import structlog

from neontycoon.building import BuildingStatus
from neontycoon.catalog import Catalog
from neontycoon.config import EngineConfig
from neontycoon.cost_scaling import CostScaling
from neontycoon.pipeline import IncomePipeline
from neontycoon.prestige import PrestigeResult, prestige_potential
from neontycoon.skill import SkillId
from neontycoon.state import EngineState

log = structlog.get_logger()


class GameEngine:
    """Authoritative economy processor for a single player session.

    Every public operation runs to completion and leaves the state either
    fully updated or untouched. Calls must be serialized by the host.
    """

    def __init__(self, catalog: Catalog, config: EngineConfig | None = None) -> None:
        config = config or EngineConfig()
        errors = catalog.validate() + config.validate()
        if errors:
            raise ValueError(
                "Invalid engine setup:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        self.catalog = catalog
        self.config = config
        self.state = EngineState.for_catalog(catalog)
        self.pipeline = IncomePipeline(config)
        self._full_price = CostScaling.exponential(config.price_growth_rate)
        self._discounted = CostScaling.exponential(
            config.price_growth_rate, config.discount_rate
        )

    # ── Core loop ────────────────────────────────────────────────────

    def tick(self, elapsed: float) -> None:
        """Advance the economy by *elapsed* seconds."""
        if not 0 <= elapsed < math.inf:
            raise ValueError(f"elapsed must be finite and >= 0, got {elapsed}")

        rate = self._recompute_rate()
        if rate > 0:
            self.state.earn(rate * elapsed)

    # ── Player actions ───────────────────────────────────────────────

    def click(self) -> float:
        """Register one manual click. Returns the amount added."""
        self.state.total_clicks += 1
        value = self.pipeline.compute_click_value(self._recompute_rate())
        self.state.earn(value)
        return value

    def buy_building(self, index: int) -> bool:
        """Attempt to buy one unit of a building. Returns True on success."""
        cost = self.building_cost(index)
        if cost is None:
            log.debug("engine.building_rejected", index=index, reason="unknown_index")
            return False

        if self.state.balance < cost:
            log.debug(
                "engine.building_rejected",
                index=index,
                cost=cost,
                balance=self.state.balance,
                reason="insufficient_funds",
            )
            return False

        self.state.balance -= cost
        self.state.building_counts[index] += 1
        log.info(
            "engine.building_bought",
            index=index,
            cost=cost,
            count=self.state.building_counts[index],
        )
        return True

    def buy_skill(self, skill_id: SkillId | str) -> bool:
        """Attempt to buy a skill with prestige currency. Returns True on success."""
        sdef = self.catalog.get_skill(skill_id)
        if sdef is None:
            log.debug("engine.skill_rejected", skill=str(skill_id), reason="unknown_skill")
            return False

        if sdef.id in self.state.owned_skills:
            log.debug("engine.skill_rejected", skill=sdef.id.value, reason="already_owned")
            return False

        if self.state.prestige_currency < sdef.cost:
            log.debug(
                "engine.skill_rejected",
                skill=sdef.id.value,
                cost=sdef.cost,
                reason="insufficient_prestige_currency",
            )
            return False

        self.state.prestige_currency -= sdef.cost
        self.state.owned_skills.add(sdef.id)
        log.info("engine.skill_bought", skill=sdef.id.value, cost=sdef.cost)
        return True

    def prestige(self) -> PrestigeResult:
        """Reset balance and buildings in exchange for prestige currency."""
        reward = self.calculate_prestige_potential()
        if reward == 0:
            return PrestigeResult(success=False, reason="Balance below prestige threshold")

        balance = self.state.balance
        self.state.prestige_currency += reward
        self.state.balance = 0.0
        self.state.building_counts = [0] * len(self.state.building_counts)
        self.state.income_multiplier = 1.0
        self.state.prestige_count += 1
        self._recompute_rate()

        log.info(
            "engine.prestige",
            reward=reward,
            balance_reset=balance,
            prestige_currency=self.state.prestige_currency,
        )
        return PrestigeResult(success=True, reward_amount=reward, balance_reset=balance)

    # ── Queries ──────────────────────────────────────────────────────

    def calculate_prestige_potential(self) -> int:
        return prestige_potential(self.state.balance, self.config.prestige_threshold)

    def get_money(self) -> float:
        return self.state.balance

    def get_income_per_sec(self) -> float:
        return self._recompute_rate()

    def get_prestige_currency(self) -> int:
        return self.state.prestige_currency

    def get_state(self) -> EngineState:
        """Return live reference to engine state."""
        return self.state

    def has_skill(self, skill_id: SkillId | str) -> bool:
        try:
            return self.state.has_skill(SkillId.parse(skill_id))
        except ValueError:
            return False

    def building_cost(self, index: int) -> float | None:
        """Current price of the next unit, or None for an unknown index."""
        bdef = self.catalog.get_building(index)
        if bdef is None:
            return None
        scaling = (
            self._discounted if self.state.has_skill(SkillId.CHEAPER) else self._full_price
        )
        return scaling.compute(bdef.base_cost, self.state.building_counts[index])

    def get_building_statuses(self) -> list[BuildingStatus]:
        result: list[BuildingStatus] = []
        for bdef in self.catalog.buildings:
            cost = self.building_cost(bdef.index)
            result.append(
                BuildingStatus(
                    index=bdef.index,
                    display_name=bdef.display_name,
                    icon=bdef.icon,
                    count=self.state.building_counts[bdef.index],
                    current_cost=cost,
                    affordable=self.state.balance >= cost,
                )
            )
        return result

    def compute_time_to_afford(self, index: int) -> float | None:
        """Seconds until affordable at the current rate. None if impossible."""
        cost = self.building_cost(index)
        if cost is None:
            return None
        if self.state.balance >= cost:
            return 0.0
        rate = self._recompute_rate()
        if rate <= 0:
            return None  # will never afford
        return (cost - self.state.balance) / rate

    # ── Extension points ─────────────────────────────────────────────

    def set_income_multiplier(self, value: float) -> None:
        """Set the global income multiplier. Prestige resets it to 1.0."""
        if not 0 < value < math.inf:
            raise ValueError(f"income multiplier must be finite and > 0, got {value}")
        self.state.income_multiplier = value
        self._recompute_rate()

    # ── Private helpers ──────────────────────────────────────────────

    def _recompute_rate(self) -> float:
        rate = self.pipeline.compute_rate(self.catalog, self.state)
        self.state.income_per_sec = rate
        return rate
