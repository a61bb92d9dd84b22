from __future__ import annotations

import pytest

from fitpath.models import Progress
from fitpath.services.progress import (
    completion_percentage,
    intensity_label,
    progress_message,
    set_current_day,
    streak,
    streak_message,
    toggle_completed,
)


def test_toggle_flips_membership_and_keeps_current_day() -> None:
    progress = Progress(current_day=5)

    on = toggle_completed(progress, 3)
    assert on.completed_days == {3}
    assert on.current_day == 5

    off = toggle_completed(on, 3)
    assert off.completed_days == set()
    assert off.current_day == 5
    # inputs are left alone
    assert progress.completed_days == set()


def test_changing_day_does_not_complete_anything() -> None:
    progress = Progress(current_day=0, completed_days={1, 2})
    moved = set_current_day(progress, 4)

    assert moved.current_day == 4
    assert moved.completed_days == {1, 2}


@pytest.mark.parametrize("day", [-1, 7, 42])
def test_out_of_range_days_are_rejected(day: int) -> None:
    with pytest.raises(ValueError):
        toggle_completed(Progress(), day)
    with pytest.raises(ValueError):
        set_current_day(Progress(), day)


def test_saved_record_is_renormalised() -> None:
    progress = Progress.model_validate({"currentDay": 2, "completedDays": [4, 1, 4, 9, -1]})

    assert progress.current_day == 2
    assert progress.completed_days == {1, 4}
    assert progress.model_dump(mode="json", by_alias=True) == {"currentDay": 2, "completedDays": [1, 4]}


def test_stale_current_day_is_clamped() -> None:
    assert Progress.model_validate({"currentDay": 11, "completedDays": []}).current_day == 6
    assert Progress.model_validate({"currentDay": -3}).current_day == 0


def test_completion_percentage() -> None:
    assert completion_percentage(Progress()) == 0
    assert completion_percentage(Progress(completed_days={0, 1, 2})) == 43
    assert completion_percentage(Progress(completed_days=set(range(7)))) == 100
    assert completion_percentage(Progress(completed_days={0}), total_days=0) == 0


def test_streak_counts_completed_days_up_to_current() -> None:
    progress = Progress(current_day=3, completed_days={0, 2, 3, 5})
    assert streak(progress) == 3


def test_messages() -> None:
    assert progress_message(100) == "Perfect week!"
    assert progress_message(71) == "Crushing it!"
    assert progress_message(43) == "Keep pushing!"
    assert progress_message(14) == "Just getting started!"

    assert streak_message(0) == "Your journey starts today!"
    assert streak_message(7) == "Perfect week! You're a champion!"
    assert streak_message(2) == "Keep crushing your goals!"


def test_intensity_label() -> None:
    assert intensity_label(1, is_rest_day=True) == "Active Recovery"
    assert intensity_label(2, is_rest_day=False) == "High Intensity"
    assert intensity_label(4, is_rest_day=False) == "Power Training"
    assert intensity_label(6, is_rest_day=False) == "Peak Performance"
