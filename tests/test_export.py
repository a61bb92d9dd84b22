from __future__ import annotations

import csv
import io
from datetime import date

from fitpath.models import UserProfile
from fitpath.services.export import (
    ExportData,
    email_body,
    share_message,
    to_csv,
    to_markdown,
    to_pdf,
    to_text,
)
from fitpath.services.routine_generator import generate_routine


def build_data() -> ExportData:
    profile = UserProfile(
        fitness_level="advanced",
        goal="strength",
        equipment="both",
        weekly_days=5,
        limitations=["knee"],
    )
    return ExportData(
        profile=profile,
        schedule=generate_routine(profile),
        completed_days={0, 1},
        generated_date=date(2024, 3, 1),
    )


def test_text_export_lists_every_day() -> None:
    data = build_data()
    text = to_text(data)

    for day in data.schedule:
        assert day.title in text
    assert "Fitness Level: ADVANCED" in text
    assert "Physical Limitations: KNEE" in text
    assert "Generated Date: 2024-03-01" in text
    assert "Completed Days: 2 / 7" in text
    assert "Completion Rate: 29%" in text
    assert "Modification: Reduce range of motion or perform seated alternative" in text
    assert text.count("Status: COMPLETED") == 2
    assert text.count("Type: REST & RECOVERY") == 2


def test_csv_has_a_row_per_exercise_and_rest_day() -> None:
    data = build_data()
    rows = list(csv.DictReader(io.StringIO(to_csv(data).decode("utf-8"))))

    assert len(rows) == 2 + 5 * 6
    rest_rows = [r for r in rows if r["rest_day"] == "yes"]
    assert [r["day"] for r in rest_rows] == ["2", "4"]
    pistol = next(r for r in rows if r["exercise"] == "Pistol Squats")
    assert pistol["sets"] == "5 each x 3"
    assert pistol["modification"]


def test_markdown_export() -> None:
    md = to_markdown(build_data())
    assert md.startswith("# FitPath Workout Plan")
    assert "## Day 2: Rest & Recovery ✓" in md
    assert "**Front Levers** (10 seconds x 3)" in md


def test_pdf_export() -> None:
    pdf_bytes = to_pdf(build_data())
    assert isinstance(pdf_bytes, (bytes, bytearray)) and len(pdf_bytes) > 1000, "PDF export seems too small or empty"
    assert pdf_bytes.startswith(b"%PDF")


def test_share_and_email_text() -> None:
    data = build_data()
    assert share_message(data.profile) == "Check out my FitPath workout plan! STRENGTH goal with 5 days per week."
    body = email_body(data)
    assert "Fitness Level: advanced" in body
    assert "Progress: 2/7 days completed" in body
