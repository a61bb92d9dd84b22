from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, MutableMapping, Optional

from fitpath.models.progress import Progress
from fitpath.models.routine import DayRoutine
from fitpath.models.user_profile import UserProfile
from . import progress as progress_ops
from .routine_generator import generate_routine
from .storage import (
    LocalStore,
    get_store,
    load_progress,
    load_user_profile,
    save_progress,
    save_user_profile,
)

logger = logging.getLogger(__name__)

SESSION_KEY = "app_state"


@dataclass
class AppState:
    """Everything the views need, with persistence on every mutating action."""

    store: LocalStore
    profile: Optional[UserProfile] = None
    schedule: List[DayRoutine] = field(default_factory=list)
    progress: Progress = field(default_factory=Progress)

    @classmethod
    def load(cls, store: LocalStore | None = None) -> "AppState":
        store = store or get_store()
        state = cls(store=store)
        state.profile = load_user_profile(store)
        if state.profile is not None:
            # the schedule is never stored; it is rebuilt from the profile
            state.schedule = generate_routine(state.profile)
            state.progress = load_progress(store) or Progress()
        return state

    @classmethod
    def in_session(cls, session: MutableMapping[str, Any], store: LocalStore | None = None) -> "AppState":
        """Return the state kept in a UI session, loading it from disk on first use."""
        if SESSION_KEY not in session:
            session[SESSION_KEY] = cls.load(store)
        return session[SESSION_KEY]

    @property
    def has_profile(self) -> bool:
        return self.profile is not None

    @property
    def current_routine(self) -> Optional[DayRoutine]:
        if not self.schedule:
            return None
        return self.schedule[self.progress.current_day]

    def complete_onboarding(self, profile: UserProfile) -> None:
        """Build the new plan and start it from day one.
        Nothing changes in memory unless both records were written.
        """
        schedule = generate_routine(profile)
        progress = Progress()
        save_user_profile(self.store, profile)
        save_progress(self.store, progress)
        self.profile = profile
        self.schedule = schedule
        self.progress = progress

    def toggle_day(self, day: int) -> None:
        progress = progress_ops.toggle_completed(self.progress, day)
        save_progress(self.store, progress)
        self.progress = progress

    def change_day(self, day: int) -> None:
        progress = progress_ops.set_current_day(self.progress, day)
        save_progress(self.store, progress)
        self.progress = progress

    def reset(self) -> None:
        self.store.clear()
        self.profile = None
        self.schedule = []
        self.progress = Progress()
        logger.info("Reset profile and progress")
