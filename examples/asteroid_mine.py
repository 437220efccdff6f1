"""A small custom catalog driven through a scripted session."""
from __future__ import annotations

from neontycoon.catalog import Catalog
from neontycoon.config import EngineConfig
from neontycoon.runtime import GameEngine


def define_catalog() -> Catalog:
    return Catalog.from_records(
        buildings=[
            {"name": "Drill", "base_cost": 10, "income": 0.5, "icon": "⛏️"},
            {"name": "Refinery", "base_cost": 250, "income": 8, "icon": "🏭"},
            {"name": "Mass Driver", "base_cost": 5000, "income": 120, "icon": "🚀"},
        ],
        skills=[
            {"id": "auto_click", "name": "Drone Swarm", "cost": 1,
             "description": "+5% passive income"},
            {"id": "cheaper", "name": "Bulk Contracts", "cost": 2,
             "description": "Buildings are 10% cheaper"},
        ],
    )


def play(seconds: int = 3600) -> GameEngine:
    """Click for the first minute, then buy the cheapest building each second."""
    engine = GameEngine(define_catalog(), EngineConfig(name="Asteroid Mine"))
    for t in range(seconds):
        if t < 60:
            for _ in range(5):
                engine.click()
        engine.tick(1.0)
        statuses = [s for s in engine.get_building_statuses() if s.affordable]
        if statuses:
            engine.buy_building(min(statuses, key=lambda s: s.current_cost).index)
    return engine


if __name__ == "__main__":
    from neontycoon.formatting import format_status_report

    print(format_status_report(play()))
