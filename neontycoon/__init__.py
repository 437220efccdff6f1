# neontycoon: idle game economy engine

from neontycoon.skill import SkillId, SkillDef
from neontycoon.building import BuildingDef, BuildingStatus
from neontycoon.catalog import Catalog, default_catalog
from neontycoon.config import EngineConfig
from neontycoon.cost_scaling import CostScaling
from neontycoon.state import EngineState
from neontycoon.pipeline import IncomePipeline
from neontycoon.prestige import PrestigeResult, prestige_potential
from neontycoon.runtime import GameEngine
from neontycoon.simulation import GreedyCheapest, Simulation, SimulationReport
from neontycoon.formatting import format_simulation_report, format_status_report
from neontycoon.log import configure_logging

__all__ = [
    # Catalog
    "SkillId",
    "SkillDef",
    "BuildingDef",
    "BuildingStatus",
    "Catalog",
    "default_catalog",
    # Config
    "EngineConfig",
    # Cost
    "CostScaling",
    # State
    "EngineState",
    # Pipeline
    "IncomePipeline",
    # Prestige
    "PrestigeResult",
    "prestige_potential",
    # Engine
    "GameEngine",
    # Simulation
    "GreedyCheapest",
    "Simulation",
    "SimulationReport",
    # Formatting
    "format_simulation_report",
    "format_status_report",
    # Logging
    "configure_logging",
]
