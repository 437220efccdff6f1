from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from neontycoon.building import BuildingDef
from neontycoon.skill import SkillDef, SkillId


@dataclass(frozen=True)
class Catalog:
    """Immutable set of building and skill definitions shared by engines."""

    buildings: tuple[BuildingDef, ...] = ()
    skills: tuple[SkillDef, ...] = ()

    # Lookup dicts built in __post_init__
    _skills_by_id: dict[SkillId, SkillDef] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "buildings", tuple(self.buildings))
        object.__setattr__(self, "skills", tuple(self.skills))
        object.__setattr__(self, "_skills_by_id", {s.id: s for s in self.skills})

    @property
    def building_count(self) -> int:
        return len(self.buildings)

    def get_building(self, index: int) -> BuildingDef | None:
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if 0 <= index < len(self.buildings):
            return self.buildings[index]
        return None

    def get_skill(self, skill_id: SkillId | str) -> SkillDef | None:
        try:
            key = SkillId.parse(skill_id)
        except ValueError:
            return None
        return self._skills_by_id.get(key)

    def validate(self) -> list[str]:
        """Check for common catalog errors. Returns list of error messages."""
        errors: list[str] = []

        for position, b in enumerate(self.buildings):
            if b.index != position:
                errors.append(
                    f"Building {b.display_name!r} has index {b.index}, expected {position}"
                )
            if b.base_cost <= 0:
                errors.append(
                    f"Building {b.display_name!r} must have a positive base_cost"
                )
            if b.income_per_sec < 0:
                errors.append(
                    f"Building {b.display_name!r} has negative income_per_sec"
                )

        seen: set[SkillId] = set()
        for s in self.skills:
            if s.id in seen:
                errors.append(f"Duplicate skill ID: {s.id!r}")
            seen.add(s.id)
            if s.cost < 0:
                errors.append(f"Skill {s.id!r} has negative cost")

        return errors

    @classmethod
    def from_records(
        cls,
        buildings: Iterable[Mapping[str, Any]] = (),
        skills: Iterable[Mapping[str, Any]] = (),
    ) -> Catalog:
        """Build a catalog from plain mappings, indexing buildings in order.

        Raises ValueError if a skill record names an unknown skill id.
        """
        building_defs = tuple(
            BuildingDef(
                index=i,
                display_name=rec.get("name", ""),
                base_cost=float(rec["base_cost"]),
                income_per_sec=float(rec.get("income", 0.0)),
                icon=rec.get("icon", ""),
            )
            for i, rec in enumerate(buildings)
        )
        skill_defs = tuple(
            SkillDef(
                id=SkillId.parse(rec["id"]),
                display_name=rec.get("name", ""),
                cost=int(rec.get("cost", 0)),
                description=rec.get("description", ""),
            )
            for rec in skills
        )
        return cls(buildings=building_defs, skills=skill_defs)


def default_catalog() -> Catalog:
    """The stock Neon Tycoon buildings and skills."""
    return Catalog.from_records(
        buildings=[
            {"name": "Data Miner", "base_cost": 15, "income": 1, "icon": "💾"},
            {"name": "Bot Network", "base_cost": 100, "income": 5, "icon": "🤖"},
            {"name": "Server Rack", "base_cost": 1100, "income": 22, "icon": "🔋"},
            {"name": "AI Cluster", "base_cost": 12000, "income": 85, "icon": "🧠"},
            {"name": "Quantum Core", "base_cost": 130000, "income": 350, "icon": "⚛️"},
            {"name": "Dyson Swarm", "base_cost": 1500000, "income": 1500, "icon": "☀️"},
            {"name": "Reality Engine", "base_cost": 25000000, "income": 8000, "icon": "🌀"},
        ],
        skills=[
            {"id": "auto_click", "name": "Auto-Clicker", "cost": 5,
             "description": "Automatic clicks 1x/sec"},
            {"id": "cheaper", "name": "Optimization", "cost": 10,
             "description": "Buildings are 10% cheaper"},
            {"id": "offline", "name": "Deep Sleep", "cost": 15,
             "description": "Offline earnings x2"},
            {"id": "hack_freq", "name": "Backdoor", "cost": 25,
             "description": "Hacks appear more frequently"},
        ],
    )
