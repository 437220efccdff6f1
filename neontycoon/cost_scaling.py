from __future__ import annotations

import math
from typing import Callable


class CostScaling:
    """Determines how building costs change with owned count."""

    def __init__(self, fn: Callable[[float, int], float]) -> None:
        self._fn = fn

    def compute(self, base_cost: float, current_count: int) -> float:
        return self._fn(base_cost, current_count)

    @classmethod
    def exponential(cls, growth_rate: float = 1.15, discount: float = 1.0) -> CostScaling:
        """Cost = floor(base * growth_rate^count * discount)."""
        gr = growth_rate  # capture
        disc = discount

        def _compute(base: float, count: int) -> float:
            return float(math.floor(base * gr ** count * disc))

        return cls(_compute)
