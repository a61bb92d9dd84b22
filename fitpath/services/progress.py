from __future__ import annotations

from fitpath.models.progress import Progress
from fitpath.models.routine import DAYS_PER_WEEK


def _check_day(day: int) -> None:
    if not 0 <= day < DAYS_PER_WEEK:
        raise ValueError(f"Day index must be between 0 and {DAYS_PER_WEEK - 1}, got {day}.")


def toggle_completed(progress: Progress, day: int) -> Progress:
    """Flip completion for one day. The current day pointer is untouched."""
    _check_day(day)
    completed = set(progress.completed_days)
    if day in completed:
        completed.remove(day)
    else:
        completed.add(day)
    return progress.model_copy(update={"completed_days": completed})


def set_current_day(progress: Progress, day: int) -> Progress:
    """Move the day pointer. Moving never marks a day complete."""
    _check_day(day)
    return progress.model_copy(update={"current_day": day})


def completion_percentage(progress: Progress, total_days: int = DAYS_PER_WEEK) -> int:
    if total_days <= 0:
        return 0
    return round(len(progress.completed_days) / total_days * 100)


def streak(progress: Progress) -> int:
    """Completed days up to and including the current day."""
    return sum(1 for d in progress.completed_days if d <= progress.current_day)


def progress_message(percentage: int) -> str:
    if percentage >= 100:
        return "Perfect week!"
    if percentage >= 70:
        return "Crushing it!"
    if percentage >= 40:
        return "Keep pushing!"
    return "Just getting started!"


def streak_message(count: int) -> str:
    milestones = {
        0: "Your journey starts today!",
        1: "First workout complete!",
        3: "Three days of consistency!",
        5: "Five days! You're unstoppable!",
        7: "Perfect week! You're a champion!",
    }
    return milestones.get(count, "Keep crushing your goals!")


def intensity_label(day: int, is_rest_day: bool) -> str:
    """Badge shown over the day viewer; the week ramps toward peak days."""
    if is_rest_day:
        return "Active Recovery"
    if day <= 2:
        return "High Intensity"
    if day <= 4:
        return "Power Training"
    return "Peak Performance"
