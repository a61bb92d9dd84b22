from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


DosageKind = Literal["reps", "duration"]


class Dosage(BaseModel):
    """How much of an exercise to do: a repetition scheme or a time."""

    model_config = ConfigDict(frozen=True)

    kind: DosageKind
    value: str = Field(..., min_length=1, description="e.g. '10 reps x 3' or '30 seconds x 3'")

    @classmethod
    def reps(cls, value: str) -> "Dosage":
        return cls(kind="reps", value=value)

    @classmethod
    def timed(cls, value: str) -> "Dosage":
        return cls(kind="duration", value=value)


class Exercise(BaseModel):
    name: str
    instructions: str
    dosage: Dosage
    modification: Optional[str] = None

    @property
    def sets(self) -> Optional[str]:
        return self.dosage.value if self.dosage.kind == "reps" else None

    @property
    def duration(self) -> Optional[str]:
        return self.dosage.value if self.dosage.kind == "duration" else None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Chair Squats",
                    "instructions": "Sit and stand without using hands",
                    "dosage": {"kind": "reps", "value": "10 reps x 3"},
                    "modification": "Reduce range of motion or perform seated alternative",
                }
            ]
        }
    }
