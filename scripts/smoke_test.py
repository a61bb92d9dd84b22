from __future__ import annotations

import tempfile
from pathlib import Path

from fitpath.models import UserProfile
from fitpath.services.app_state import AppState
from fitpath.services.export import ExportData, to_csv, to_markdown, to_pdf, to_text
from fitpath.services.storage import LocalStore


def main() -> None:
    profile = UserProfile(
        fitness_level="intermediate",
        goal="strength",
        equipment="dumbbells",
        weekly_days=4,
        limitations=["knee"],
    )

    with tempfile.TemporaryDirectory() as tmp:
        store = LocalStore(Path(tmp) / "store.json")
        state = AppState.load(store)
        assert not state.has_profile, "Fresh store should have no profile"

        state.complete_onboarding(profile)
        state.toggle_day(state.progress.current_day)
        state.change_day(2)

        reloaded = AppState.load(store)
        assert reloaded.profile == profile, "Profile did not survive a reload"
        assert reloaded.progress == state.progress, "Progress did not survive a reload"
        assert len(reloaded.schedule) == 7, "Schedule must cover the whole week"

        data = ExportData(profile=profile, schedule=reloaded.schedule, completed_days=reloaded.progress.completed_days)
        assert to_text(data), "Text export empty"
        assert to_csv(data), "CSV export empty"
        assert to_markdown(data), "Markdown export empty"
        assert to_pdf(data).startswith(b"%PDF"), "PDF export is not a PDF"

        rest = sum(1 for d in reloaded.schedule if d.is_rest_day)
        print(f"SMOKE OK: workout_days={7 - rest} rest_days={rest} completed={len(reloaded.progress.completed_days)}")


if __name__ == "__main__":
    main()
