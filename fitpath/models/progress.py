from __future__ import annotations

from typing import List, Set

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .routine import DAYS_PER_WEEK


class Progress(BaseModel):
    """Current day pointer plus the set of completed day indices."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    current_day: int = Field(0, alias="currentDay")
    completed_days: Set[int] = Field(default_factory=set, alias="completedDays")

    @field_validator("current_day")
    @classmethod
    def _clamp_current_day(cls, value: int) -> int:
        return min(max(value, 0), DAYS_PER_WEEK - 1)

    @field_validator("completed_days")
    @classmethod
    def _in_week(cls, value: Set[int]) -> Set[int]:
        # saved lists may carry duplicates or stale indices
        return {d for d in value if 0 <= d < DAYS_PER_WEEK}

    @field_serializer("completed_days")
    def _as_sorted_list(self, value: Set[int]) -> List[int]:
        return sorted(value)

    def is_completed(self, day: int) -> bool:
        return day in self.completed_days
