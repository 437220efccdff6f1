from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildingDef:
    """Static definition of a purchasable income building."""

    index: int
    display_name: str = ""
    base_cost: float = 0.0
    income_per_sec: float = 0.0
    icon: str = ""

    def __post_init__(self) -> None:
        if not self.display_name:
            object.__setattr__(self, "display_name", f"building_{self.index}")


@dataclass(frozen=True)
class BuildingStatus:
    """Read-only snapshot of a building for query results."""

    index: int
    display_name: str
    icon: str
    count: int
    current_cost: float
    affordable: bool
