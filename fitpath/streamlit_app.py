from __future__ import annotations

# Ensure the repository root is on sys.path so that absolute imports like `fitpath.*` work
# when Streamlit runs this file from within the fitpath/ directory.
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from typing import Any, Dict, List, Tuple

import streamlit as st
from pydantic import ValidationError

from fitpath.config import configure_logging
from fitpath.models import UserProfile
from fitpath.services.app_state import AppState
from fitpath.services.coach import pick_coach_message
from fitpath.services.progress import (
    completion_percentage,
    intensity_label,
    progress_message,
    streak,
    streak_message,
)
from fitpath.services.storage import StorageError

configure_logging()
st.set_page_config(page_title="FitPath", page_icon="💪", layout="wide")

st.markdown("""
<style>
.day-chip{
  display:inline-block; width:2.4rem; height:2.4rem; line-height:2.4rem;
  text-align:center; border-radius:10px; font-weight:700; margin-right:.3rem;
  background: rgba(0,0,0,.05); border: 1px solid rgba(0,0,0,.08);
}
.day-chip.done{ background:#dcfce7; border-color:#22c55e; }
.day-chip.current{ border:2px solid #f97316; }
.day-chip.rest{ color:#64748b; }
.mod-note{ color:#b45309; font-size:.9rem; }
</style>
""", unsafe_allow_html=True)


# (value, label, description)
FITNESS_LEVELS: List[Tuple[str, str, str]] = [
    ("beginner", "Beginner", "New to exercise or returning after a long break"),
    ("intermediate", "Intermediate", "Regular exercise 2-3 times per week"),
    ("advanced", "Advanced", "Consistent training 4+ times per week"),
]
GOALS: List[Tuple[str, str, str]] = [
    ("weight-loss", "Weight Loss", "Burn calories and shed excess weight"),
    ("strength", "Build Strength", "Increase muscle mass and power"),
    ("mobility", "Improve Mobility", "Enhance flexibility and movement"),
    ("general-health", "General Health", "Overall wellness and fitness"),
]
EQUIPMENT: List[Tuple[str, str, str]] = [
    ("none", "No Equipment", "Bodyweight exercises only"),
    ("dumbbells", "Dumbbells", "Free weights for resistance"),
    ("resistance-bands", "Resistance Bands", "Portable resistance training"),
    ("both", "Full Setup", "Dumbbells and bands"),
]
LIMITATIONS: List[Tuple[str, str]] = [
    ("knee", "Knee Issues"),
    ("back", "Back Concerns"),
    ("shoulder", "Shoulder Limitations"),
]
STEPS = [
    ("Fitness level", "Where does your fitness journey begin?"),
    ("Your goal", "What do you want to achieve?"),
    ("Equipment", "What tools do you have access to?"),
    ("Commitment", "How many days per week will you train?"),
    ("Limitations", "Any physical considerations we should know?"),
]


def get_state() -> AppState:
    return AppState.in_session(st.session_state)


def choice_radio(label: str, options: List[Tuple[str, str, str]], current: str | None) -> str | None:
    values = [o[0] for o in options]
    lookup = {o[0]: o for o in options}
    return st.radio(
        label,
        values,
        index=values.index(current) if current in values else None,
        format_func=lambda v: f"{lookup[v][1]}: {lookup[v][2]}",
        label_visibility="collapsed",
    )


def render_onboarding(state: AppState) -> None:
    st.title("💪 FitPath")
    st.caption("Your personalised fitness journey starts here")

    # widget values vanish when a step is not rendered, so answers live here
    answers: Dict[str, Any] = st.session_state.setdefault("ob-answers", {})
    step = st.session_state.setdefault("ob-step", 0)
    title, subtitle = STEPS[step]
    st.progress((step + 1) / len(STEPS), text=f"Step {step + 1} of {len(STEPS)}")
    st.subheader(title)
    st.write(subtitle)

    if step == 0:
        answers["fitness_level"] = choice_radio("Fitness level", FITNESS_LEVELS, answers.get("fitness_level"))
        valid = answers["fitness_level"] is not None
    elif step == 1:
        answers["goal"] = choice_radio("Goal", GOALS, answers.get("goal"))
        valid = answers["goal"] is not None
    elif step == 2:
        answers["equipment"] = choice_radio("Equipment", EQUIPMENT, answers.get("equipment"))
        valid = answers["equipment"] is not None
    elif step == 3:
        answers["weekly_days"] = st.slider("Days per week", min_value=1, max_value=7, value=answers.get("weekly_days", 3))
        valid = True
    else:
        chosen = set(answers.get("limitations", []))
        no_limits = st.checkbox("No limitations", value=not chosen)
        picked = []
        for value, label in LIMITATIONS:
            if st.checkbox(label, value=value in chosen and not no_limits, disabled=no_limits):
                picked.append(value)
        answers["limitations"] = [] if no_limits else picked
        valid = True

    prev_col, _, next_col = st.columns([1, 4, 1])
    with prev_col:
        if st.button("◀ Previous", disabled=step == 0, use_container_width=True):
            st.session_state["ob-step"] = step - 1
            st.rerun()
    with next_col:
        last = step == len(STEPS) - 1
        if st.button("Start journey ▶" if last else "Next ▶", disabled=not valid, use_container_width=True, type="primary"):
            if not last:
                st.session_state["ob-step"] = step + 1
                st.rerun()
            submit_onboarding(state, answers)


def submit_onboarding(state: AppState, answers: Dict[str, Any]) -> None:
    try:
        profile = UserProfile.model_validate(answers)
    except ValidationError as e:
        st.error(f"Please complete every step before starting: {e.error_count()} answer(s) missing or invalid.")
        return
    try:
        state.complete_onboarding(profile)
    except StorageError as e:
        st.error(f"Could not save your plan: {e}")
        return
    st.session_state["ob-step"] = 0
    st.session_state["ob-answers"] = {}
    st.session_state["view"] = "routine"
    st.toast("Your plan is ready.")
    st.rerun()


def render_routine(state: AppState) -> None:
    day = state.current_routine
    if day is None:
        st.info("No plan yet. Complete onboarding first.")
        return
    done = state.progress.is_completed(day.day)

    top_l, top_r = st.columns([3, 1])
    with top_l:
        st.header(day.title)
    with top_r:
        st.markdown(f"**{intensity_label(day.day, day.is_rest_day).upper()}**")

    coach = pick_coach_message(is_workout_day=not day.is_rest_day, has_completed_today=done)
    st.info(f"🧠 Coach: {coach.message}")

    if day.is_rest_day:
        st.write(day.description)
    else:
        for idx, ex in enumerate(day.exercises or [], start=1):
            with st.container(border=True):
                st.markdown(f"**{idx}. {ex.name}** · {ex.sets or ex.duration}")
                st.caption(ex.instructions)
                if ex.modification:
                    st.markdown(f"<div class='mod-note'>⚠️ {ex.modification}</div>", unsafe_allow_html=True)

    prev_col, mid_col, next_col = st.columns([1, 2, 1])
    with prev_col:
        if st.button("◀ Previous day", disabled=day.day == 0, use_container_width=True):
            state.change_day(day.day - 1)
            st.rerun()
    with mid_col:
        label = "↩️ Mark as not done" if done else "✅ Mark day complete"
        if st.button(label, use_container_width=True, type="secondary" if done else "primary"):
            state.toggle_day(day.day)
            st.rerun()
    with next_col:
        if st.button("Next day ▶", disabled=day.day == len(state.schedule) - 1, use_container_width=True):
            state.change_day(day.day + 1)
            st.rerun()

    st.caption(streak_message(streak(state.progress)))


def render_progress(state: AppState) -> None:
    pct = completion_percentage(state.progress, len(state.schedule))
    current_streak = streak(state.progress)

    c1, c2, c3 = st.columns(3)
    c1.metric("Completed", f"{len(state.progress.completed_days)} / {len(state.schedule)} days")
    c2.metric("Completion", f"{pct}%")
    c3.metric("Day streak", current_streak)

    st.progress(pct / 100, text=progress_message(pct))

    chips = []
    for day in state.schedule:
        classes = ["day-chip"]
        if state.progress.is_completed(day.day):
            classes.append("done")
        if day.day == state.progress.current_day:
            classes.append("current")
        if day.is_rest_day:
            classes.append("rest")
        chips.append(f"<span class='{' '.join(classes)}' title='{day.title}'>{day.day + 1}</span>")
    st.markdown("".join(chips), unsafe_allow_html=True)
    st.caption(streak_message(current_streak))


state = get_state()

if not state.has_profile:
    render_onboarding(state)
else:
    view = st.session_state.setdefault("view", "routine")
    with st.sidebar:
        st.header("💪 FitPath")
        if st.button("🏋️ Workout", use_container_width=True, type="primary" if view == "routine" else "secondary"):
            st.session_state["view"] = "routine"
            st.rerun()
        if st.button("📊 Progress", use_container_width=True, type="primary" if view == "progress" else "secondary"):
            st.session_state["view"] = "progress"
            st.rerun()
        with st.popover("🔄 Reset"):
            st.write("This clears your profile and progress.")
            if st.button("Yes, reset everything", key="btn-reset", use_container_width=True):
                state.reset()
                st.session_state["view"] = "routine"
                st.toast("Cleared.")
                st.rerun()

    if view == "progress":
        render_progress(state)
    else:
        render_routine(state)
