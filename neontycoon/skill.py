from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SkillId(str, Enum):
    AUTO_CLICK = "auto_click"
    CHEAPER = "cheaper"
    OFFLINE = "offline"
    HACK_FREQ = "hack_freq"

    @classmethod
    def parse(cls, value: SkillId | str) -> SkillId:
        """Convert a raw id to a SkillId. Raises ValueError for unknown ids."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown skill id: {value!r}. Expected one of {[s.value for s in cls]}"
            ) from None


@dataclass(frozen=True)
class SkillDef:
    """Static definition of a permanent upgrade bought with prestige currency."""

    id: SkillId
    display_name: str = ""
    cost: int = 0
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", SkillId.parse(self.id))
        if not self.display_name:
            object.__setattr__(self, "display_name", self.id.value)
