from __future__ import annotations

# Same bootstrap as the main page: this page can be the first script a session runs.
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import streamlit as st

from fitpath.config import configure_logging
from fitpath.services.app_state import AppState
from fitpath.services.export import ExportData, email_body, share_message, to_csv, to_markdown, to_pdf, to_text

configure_logging()
st.set_page_config(page_title="Export Plan", page_icon="📤")

st.title("Export & share")

state = AppState.in_session(st.session_state)
if not state.has_profile:
    st.info("No plan yet. Complete onboarding on the main page first.")
else:
    data = ExportData(profile=state.profile, schedule=state.schedule, completed_days=state.progress.completed_days)
    st.download_button("📝 Text", data=to_text(data), file_name="fitpath-workout-plan.txt", mime="text/plain")
    st.download_button("📄 CSV", data=to_csv(data), file_name="fitpath-workout-plan.csv", mime="text/csv")
    st.download_button("🗒️ Markdown", data=to_markdown(data), file_name="fitpath-workout-plan.md", mime="text/markdown")
    st.download_button("📘 PDF", data=to_pdf(data), file_name="fitpath-workout-plan.pdf", mime="application/pdf")

    st.subheader("Share")
    st.code(share_message(state.profile), language=None)
    with st.expander("E-mail text"):
        st.code(email_body(data), language=None)
