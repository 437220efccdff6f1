from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Tunable economy constants for a game engine."""

    name: str = "Neon Tycoon"
    price_growth_rate: float = 1.15
    discount_rate: float = 0.9
    auto_click_bonus: float = 0.05
    click_base_value: float = 1.0
    click_income_share: float = 0.05
    prestige_threshold: float = 1_000_000

    def validate(self) -> list[str]:
        """Check for invalid constants. Returns list of error messages."""
        errors: list[str] = []
        if self.price_growth_rate < 1.0:
            errors.append(
                f"price_growth_rate must be >= 1.0, got {self.price_growth_rate}"
            )
        if not 0.0 < self.discount_rate <= 1.0:
            errors.append(
                f"discount_rate must be in (0, 1], got {self.discount_rate}"
            )
        if self.auto_click_bonus < 0:
            errors.append(f"auto_click_bonus must be >= 0, got {self.auto_click_bonus}")
        if self.click_base_value < 0:
            errors.append(f"click_base_value must be >= 0, got {self.click_base_value}")
        if self.click_income_share < 0:
            errors.append(
                f"click_income_share must be >= 0, got {self.click_income_share}"
            )
        if self.prestige_threshold <= 0:
            errors.append(
                f"prestige_threshold must be > 0, got {self.prestige_threshold}"
            )
        return errors
