from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from .exercise import Exercise


DAYS_PER_WEEK = 7


class DayRoutine(BaseModel):
    """One entry of the weekly schedule: a rest day or a workout day, never both."""

    day: int = Field(..., ge=0, le=DAYS_PER_WEEK - 1)
    title: str
    is_rest_day: bool
    exercises: Optional[List[Exercise]] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def _rest_or_workout(self) -> "DayRoutine":
        if self.is_rest_day:
            if self.exercises is not None:
                raise ValueError(f"Rest day {self.day} must not list exercises.")
            if not self.description:
                raise ValueError(f"Rest day {self.day} needs a description.")
        else:
            if not self.exercises:
                raise ValueError(f"Workout day {self.day} needs at least one exercise.")
            if self.description is not None:
                raise ValueError(f"Workout day {self.day} must not carry a rest description.")
        return self
