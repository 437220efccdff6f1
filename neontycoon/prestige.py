from __future__ import annotations

import math
from dataclasses import dataclass


def prestige_potential(balance: float, threshold: float = 1_000_000) -> int:
    """Prestige currency a reset would grant at *balance*.

    Zero below *threshold*, otherwise floor(sqrt(balance / threshold)).
    Raises OverflowError if *balance* is infinite.
    """
    if balance < threshold:
        return 0
    return math.floor(math.sqrt(balance / threshold))


@dataclass(frozen=True)
class PrestigeResult:
    """Outcome of a prestige attempt."""

    success: bool
    reward_amount: int = 0
    balance_reset: float = 0.0
    reason: str = ""
