from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


FitnessLevel = Literal["beginner", "intermediate", "advanced"]
Goal = Literal["weight-loss", "strength", "mobility", "general-health"]
Equipment = Literal["none", "dumbbells", "resistance-bands", "both"]
Limitation = Literal["knee", "back", "shoulder"]

# Phrases used by older forms and saved profiles -> canonical tag
LIMITATION_ALIASES: Dict[str, Limitation] = {
    "knee": "knee",
    "knees": "knee",
    "knee issues": "knee",
    "back": "back",
    "back problems": "back",
    "back concerns": "back",
    "shoulder": "shoulder",
    "shoulders": "shoulder",
    "shoulder concerns": "shoulder",
    "shoulder limitations": "shoulder",
}
NO_LIMITATIONS = {"", "none", "no limitations"}


def normalize_limitation(tag: str) -> Optional[str]:
    """Map a limitation phrase onto the canonical vocabulary.
    Returns None for the "no limitations" choice; unknown tags are kept lower-cased.
    """
    key = " ".join(str(tag).strip().lower().split())
    if key in NO_LIMITATIONS:
        return None
    return LIMITATION_ALIASES.get(key, key)


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    fitness_level: FitnessLevel = Field(..., alias="fitnessLevel")
    goal: Goal
    equipment: Equipment
    weekly_days: int = Field(..., alias="weeklyDays")
    limitations: List[str] = Field(default_factory=list)

    @field_validator("weekly_days")
    @classmethod
    def _clamp_weekly_days(cls, value: int) -> int:
        return min(max(value, 1), 7)

    @field_validator("limitations", mode="before")
    @classmethod
    def _canonical_limitations(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        out: List[str] = []
        for tag in value:
            canon = normalize_limitation(tag)
            if canon is not None and canon not in out:
                out.append(canon)
        return out

    def has_limitation(self, tag: str) -> bool:
        return normalize_limitation(tag) in self.limitations
