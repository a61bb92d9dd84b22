from .catalog import get_exercises, get_workout_titles
from .routine_generator import generate_routine, modification_for, rest_day_indices
from .progress import (
    completion_percentage,
    set_current_day,
    streak,
    toggle_completed,
)
from .storage import (
    LocalStore,
    StorageError,
    get_store,
    load_progress,
    load_user_profile,
    save_progress,
    save_user_profile,
)
from .app_state import AppState
from .export import ExportData, to_csv, to_markdown, to_pdf, to_text
from .coach import CoachMessage, pick_coach_message

__all__ = [
    "get_exercises",
    "get_workout_titles",
    "generate_routine",
    "modification_for",
    "rest_day_indices",
    "completion_percentage",
    "set_current_day",
    "streak",
    "toggle_completed",
    "LocalStore",
    "StorageError",
    "get_store",
    "load_progress",
    "load_user_profile",
    "save_progress",
    "save_user_profile",
    "AppState",
    "ExportData",
    "to_csv",
    "to_markdown",
    "to_pdf",
    "to_text",
    "CoachMessage",
    "pick_coach_message",
]
