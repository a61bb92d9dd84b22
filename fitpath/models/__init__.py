from .exercise import Dosage, DosageKind, Exercise
from .routine import DAYS_PER_WEEK, DayRoutine
from .progress import Progress
from .user_profile import (
    Equipment,
    FitnessLevel,
    Goal,
    Limitation,
    UserProfile,
    normalize_limitation,
)

__all__ = [
    "Dosage",
    "DosageKind",
    "Exercise",
    "DAYS_PER_WEEK",
    "DayRoutine",
    "Progress",
    "Equipment",
    "FitnessLevel",
    "Goal",
    "Limitation",
    "UserProfile",
    "normalize_limitation",
]
