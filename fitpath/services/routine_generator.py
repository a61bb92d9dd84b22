from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from fitpath.models.exercise import Exercise
from fitpath.models.routine import DAYS_PER_WEEK, DayRoutine
from fitpath.models.user_profile import UserProfile
from fitpath.services.catalog import get_exercises, get_workout_titles

logger = logging.getLogger(__name__)

REST_DAY_LABEL = "Rest & Recovery"
REST_DAY_DESCRIPTION = "Light stretching or gentle walking is encouraged. Listen to your body."

# (limitation tag, name fragments, modification); later rules win when several match
MODIFICATION_RULES: Tuple[Tuple[str, Tuple[str, ...], str], ...] = (
    ("knee", ("Squat", "Lunge"), "Reduce range of motion or perform seated alternative"),
    ("back", ("Plank", "Burpee"), "Focus on form, reduce intensity or choose alternative"),
    ("shoulder", ("Push-up",), "Perform on knees or against wall to reduce shoulder load"),
)


def _workout_day_count(weekly_days: int) -> int:
    return min(max(weekly_days, 1), DAYS_PER_WEEK)


def rest_day_indices(rest_days: int) -> List[int]:
    """Spread rest days over the week, one at the end of each interval.
    Valid for 0..6 rest days, which always yields that many distinct indices.
    """
    if rest_days <= 0:
        return []
    interval = DAYS_PER_WEEK // (rest_days + 1)
    return [min((i + 1) * interval - 1, DAYS_PER_WEEK - 1) for i in range(rest_days)]


def modification_for(exercise_name: str, limitations: Sequence[str]) -> Optional[str]:
    modification: Optional[str] = None
    for tag, fragments, advice in MODIFICATION_RULES:
        if tag in limitations and any(f in exercise_name for f in fragments):
            modification = advice
    return modification


def _apply_modifications(exercises: List[Exercise], limitations: Sequence[str]) -> List[Exercise]:
    for ex in exercises:
        ex.modification = modification_for(ex.name, limitations)
    return exercises


def _rest_day(day: int) -> DayRoutine:
    return DayRoutine(
        day=day,
        title=f"Day {day + 1}: {REST_DAY_LABEL}",
        is_rest_day=True,
        description=REST_DAY_DESCRIPTION,
    )


def _workout_day(profile: UserProfile, day: int, titles: Sequence[str]) -> DayRoutine:
    exercises = _apply_modifications(get_exercises(profile.fitness_level, profile.goal), profile.limitations)
    return DayRoutine(
        day=day,
        title=f"Day {day + 1}: {titles[day % len(titles)]}",
        is_rest_day=False,
        exercises=exercises,
    )


def generate_routine(profile: UserProfile) -> List[DayRoutine]:
    """Build the 7-day schedule for a profile.

    - weekly_days is clamped to 1..7; the remaining days are rest days.
    - Workout titles cycle by absolute day index, so a run of rest days
      shifts which title the next workout day gets.
    - Every workout day gets the same level/goal exercise list, annotated
      with any limitation modifications.
    Unknown level/goal/equipment values fall back to the default catalog entries.
    """
    workout_days = _workout_day_count(profile.weekly_days)
    rest = set(rest_day_indices(DAYS_PER_WEEK - workout_days))
    titles = get_workout_titles(profile.goal, profile.equipment)

    routine: List[DayRoutine] = []
    for day in range(DAYS_PER_WEEK):
        if day in rest:
            routine.append(_rest_day(day))
        else:
            routine.append(_workout_day(profile, day, titles))

    logger.debug(
        "Generated routine level=%s goal=%s equipment=%s workout_days=%d rest=%s",
        profile.fitness_level, profile.goal, profile.equipment, workout_days, sorted(rest),
    )
    return routine
