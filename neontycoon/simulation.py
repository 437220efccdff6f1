from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from neontycoon.runtime import GameEngine

log = structlog.get_logger()

MAX_TICKS = 10_000_000


@dataclass(frozen=True)
class PurchaseRecord:
    time: float
    index: int
    cost: float


@dataclass
class SimulationReport:
    """Summary of a headless session."""

    total_time: float = 0.0
    clicks: int = 0
    final_balance: float = 0.0
    final_income_per_sec: float = 0.0
    prestiges: int = 0
    prestige_currency: int = 0
    purchases: list[PurchaseRecord] = field(default_factory=list)


class GreedyCheapest:
    """Buy the cheapest affordable building, repeatedly, every tick."""

    def __init__(self, cps: float = 0.0, prestige: bool = False) -> None:
        self.cps = cps
        self.prestige = prestige

    def decide_purchase(self, engine: GameEngine) -> int | None:
        affordable = [s for s in engine.get_building_statuses() if s.affordable]
        if not affordable:
            return None
        return min(affordable, key=lambda s: s.current_cost).index

    def describe(self) -> str:
        parts = ["GreedyCheapest"]
        if self.cps:
            parts.append(f"({self.cps} CPS)")
        return " ".join(parts)


class Simulation:
    """Drives an engine for a fixed span of simulated time."""

    def __init__(
        self,
        engine: GameEngine,
        strategy: GreedyCheapest,
        duration: float,
        tick_resolution: float = 1.0,
    ) -> None:
        if tick_resolution <= 0:
            raise ValueError(f"tick_resolution must be > 0, got {tick_resolution}")
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        self.engine = engine
        self.strategy = strategy
        self.duration = duration
        self.tick_resolution = tick_resolution

    def run(self) -> SimulationReport:
        report = SimulationReport()
        engine = self.engine
        now = 0.0
        click_debt = 0.0
        ticks = 0

        while now < self.duration and ticks < MAX_TICKS:
            step = min(self.tick_resolution, self.duration - now)
            engine.tick(step)
            now += step
            ticks += 1

            # Fractional clicks carry over to the next tick
            click_debt += self.strategy.cps * step
            while click_debt >= 1.0:
                engine.click()
                click_debt -= 1.0

            while True:
                index = self.strategy.decide_purchase(engine)
                if index is None:
                    break
                cost = engine.building_cost(index)
                if not engine.buy_building(index):
                    break
                report.purchases.append(PurchaseRecord(time=now, index=index, cost=cost))

            if self.strategy.prestige and engine.calculate_prestige_potential() > 0:
                engine.prestige()

        state = engine.get_state()
        report.total_time = now
        report.clicks = state.total_clicks
        report.final_balance = state.balance
        report.final_income_per_sec = engine.get_income_per_sec()
        report.prestiges = state.prestige_count
        report.prestige_currency = state.prestige_currency
        log.info(
            "simulation.finished",
            total_time=now,
            ticks=ticks,
            purchases=len(report.purchases),
        )
        return report
