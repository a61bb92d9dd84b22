from __future__ import annotations

from itertools import product
from typing import List

import pytest

from fitpath.models import DayRoutine, UserProfile
from fitpath.services.catalog import WORKOUT_TITLES, get_exercises
from fitpath.services.routine_generator import (
    REST_DAY_DESCRIPTION,
    generate_routine,
    modification_for,
    rest_day_indices,
)

LEVELS = ["beginner", "intermediate", "advanced"]
GOALS = ["weight-loss", "strength", "mobility", "general-health"]
EQUIPMENT = ["none", "dumbbells", "resistance-bands", "both"]

KNEE_MOD = "Reduce range of motion or perform seated alternative"
BACK_MOD = "Focus on form, reduce intensity or choose alternative"
SHOULDER_MOD = "Perform on knees or against wall to reduce shoulder load"


def build_profile(
    level: str = "beginner",
    goal: str = "weight-loss",
    equipment: str = "none",
    days: int = 3,
    limitations: List[str] | None = None,
) -> UserProfile:
    return UserProfile(
        fitness_level=level,
        goal=goal,
        equipment=equipment,
        weekly_days=days,
        limitations=limitations or [],
    )


def rest_days(routine: List[DayRoutine]) -> List[int]:
    return [d.day for d in routine if d.is_rest_day]


def test_every_profile_gets_a_well_formed_week() -> None:
    for level, goal, equipment, days in product(LEVELS, GOALS, EQUIPMENT, range(1, 8)):
        routine = generate_routine(build_profile(level, goal, equipment, days))

        assert [d.day for d in routine] == list(range(7))
        assert len(rest_days(routine)) == 7 - days, f"{level}/{goal}/{equipment}/{days}"
        for d in routine:
            if d.is_rest_day:
                assert d.exercises is None and d.description == REST_DAY_DESCRIPTION
                assert d.title == f"Day {d.day + 1}: Rest & Recovery"
            else:
                assert d.exercises and d.description is None
                assert d.title.startswith(f"Day {d.day + 1}: ")


@pytest.mark.parametrize("rest", range(0, 7))
def test_rest_day_indices_are_distinct_and_in_week(rest: int) -> None:
    indices = rest_day_indices(rest)
    assert len(indices) == rest
    assert len(set(indices)) == rest
    assert all(0 <= i <= 6 for i in indices)


def test_rest_day_spread() -> None:
    assert rest_day_indices(0) == []
    assert rest_day_indices(1) == [2]
    assert rest_day_indices(2) == [1, 3]
    assert rest_day_indices(3) == [0, 1, 2]
    assert rest_day_indices(6) == [0, 1, 2, 3, 4, 5]


def test_weekly_days_are_clamped_to_the_week() -> None:
    too_many = UserProfile.model_construct(
        fitness_level="beginner", goal="strength", equipment="none", weekly_days=12, limitations=[]
    )
    assert rest_days(generate_routine(too_many)) == []

    too_few = UserProfile.model_construct(
        fitness_level="beginner", goal="strength", equipment="none", weekly_days=0, limitations=[]
    )
    routine = generate_routine(too_few)
    assert len(rest_days(routine)) == 6
    assert routine[6].is_rest_day is False


def test_generation_is_deterministic() -> None:
    profile = build_profile("intermediate", "strength", "both", 5, ["knee", "back", "shoulder"])
    assert generate_routine(profile) == generate_routine(profile)


def test_unknown_catalog_keys_fall_back_to_defaults() -> None:
    profile = UserProfile.model_construct(
        fitness_level="elite", goal="cardio", equipment="kettlebells", weekly_days=4, limitations=[]
    )
    routine = generate_routine(profile)

    assert len(routine) == 7
    default_names = [ex.name for ex in get_exercises("beginner", "general-health")]
    titles = WORKOUT_TITLES[("general-health", "none")]
    for d in routine:
        if d.is_rest_day:
            continue
        assert [ex.name for ex in d.exercises or []] == default_names
        assert d.title == f"Day {d.day + 1}: {titles[d.day % 4]}"


def test_beginner_weight_loss_three_days() -> None:
    routine = generate_routine(build_profile("beginner", "weight-loss", "none", 3))

    assert rest_days(routine) == [0, 1, 2, 3]
    assert [d.title for d in routine[4:]] == [
        "Day 5: Full Body Cardio",
        "Day 6: Core & Cardio",
        "Day 7: Lower Body Power",
    ]
    expected = [ex.name for ex in get_exercises("beginner", "weight-loss")]
    for d in routine[4:]:
        assert [ex.name for ex in d.exercises or []] == expected
        assert all(ex.modification is None for ex in d.exercises or [])


def test_advanced_strength_full_week_with_knee_issue() -> None:
    routine = generate_routine(build_profile("advanced", "strength", "both", 7, ["knee"]))

    assert rest_days(routine) == []
    titles = WORKOUT_TITLES[("strength", "both")]
    assert [d.title for d in routine] == [f"Day {i + 1}: {titles[i % 4]}" for i in range(7)]
    assert routine[4].title == "Day 5: Progressive Overload"

    for d in routine:
        by_name = {ex.name: ex for ex in d.exercises or []}
        assert by_name["Pistol Squats"].modification == KNEE_MOD
        assert by_name["Handstand Push-ups"].modification is None


def test_knee_rule_marks_every_squat_and_lunge() -> None:
    for level, goal in product(LEVELS, GOALS):
        routine = generate_routine(build_profile(level, goal, "none", 7, ["knee"]))
        for d in routine:
            for ex in d.exercises or []:
                if "Squat" in ex.name or "Lunge" in ex.name:
                    assert ex.modification == KNEE_MOD, ex.name
                else:
                    assert ex.modification is None, ex.name


def test_back_and_shoulder_rules() -> None:
    routine = generate_routine(build_profile("intermediate", "weight-loss", "none", 7, ["back"]))
    mods = {ex.name: ex.modification for ex in routine[0].exercises or []}
    assert mods["Burpees"] == BACK_MOD
    assert mods["Plank Jacks"] == BACK_MOD
    assert mods["Bodyweight Squats"] is None

    routine = generate_routine(build_profile("advanced", "strength", "none", 7, ["shoulder"]))
    mods = {ex.name: ex.modification for ex in routine[0].exercises or []}
    assert mods["Handstand Push-ups"] == SHOULDER_MOD
    assert mods["Planche Push-ups"] == SHOULDER_MOD
    assert mods["Muscle-ups"] is None


def test_legacy_limitation_phrases_still_trigger_rules() -> None:
    profile = build_profile("intermediate", "strength", "none", 7, ["Knee issues", "Shoulder concerns"])
    assert profile.limitations == ["knee", "shoulder"]

    mods = {ex.name: ex.modification for ex in generate_routine(profile)[0].exercises or []}
    assert mods["Lunges"] == KNEE_MOD
    assert mods["Push-ups"] == SHOULDER_MOD
    assert mods["Plank"] is None


def test_later_rule_wins_when_several_match() -> None:
    assert modification_for("Squat Burpee", ["knee", "back"]) == BACK_MOD
    assert modification_for("Squat Burpee", ["knee"]) == KNEE_MOD
    assert modification_for("Squat Burpee", []) is None


def test_titles_cycle_by_absolute_day_index() -> None:
    # rest days at 1 and 3 shift the cycle: days 0, 2, 4 reuse title positions 0, 2, 0
    routine = generate_routine(build_profile("beginner", "mobility", "none", 5))
    titles = WORKOUT_TITLES[("mobility", "none")]

    assert rest_days(routine) == [1, 3]
    assert routine[0].title == f"Day 1: {titles[0]}"
    assert routine[2].title == f"Day 3: {titles[2]}"
    assert routine[4].title == f"Day 5: {titles[0]}"


def test_days_do_not_share_exercise_objects() -> None:
    routine = generate_routine(build_profile("beginner", "strength", "none", 7))
    routine[0].exercises[0].modification = "changed"  # type: ignore[index]

    assert routine[1].exercises[0].modification is None  # type: ignore[index]
    assert get_exercises("beginner", "strength")[0].modification is None
