from __future__ import annotations

import csv
import io
from datetime import date
from typing import List, Set

from pydantic import BaseModel, Field
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from fitpath.models.progress import Progress
from fitpath.models.routine import DAYS_PER_WEEK, DayRoutine
from fitpath.models.user_profile import UserProfile
from .progress import completion_percentage

RULE = "=" * 60
SUB_RULE = "-" * 30


class ExportData(BaseModel):
    profile: UserProfile
    schedule: List[DayRoutine]
    completed_days: Set[int] = Field(default_factory=set)
    generated_date: date = Field(default_factory=date.today)

    @property
    def completion(self) -> int:
        return completion_percentage(Progress(completed_days=self.completed_days), len(self.schedule) or DAYS_PER_WEEK)


def _pretty(value: str) -> str:
    return value.replace("-", " ").upper()


def _limitations_text(profile: UserProfile) -> str:
    return ", ".join(profile.limitations).upper() if profile.limitations else "NONE"


def _day_lines(day: DayRoutine, completed: bool) -> List[str]:
    lines = [
        f"{'=' * 20} DAY {day.day + 1} {'=' * 20}",
        f"Status: {'COMPLETED' if completed else 'PENDING'}",
        f"Title: {day.title}",
    ]
    if day.is_rest_day:
        lines.append("Type: REST & RECOVERY")
        lines.append(f"Description: {day.description}")
        return lines
    exercises = day.exercises or []
    lines.append("Type: WORKOUT DAY")
    lines.append(f"Exercises: {len(exercises)} exercises")
    lines.append("")
    for i, ex in enumerate(exercises, start=1):
        lines.append(f"  {i}. {ex.name.upper()}")
        lines.append(f"     Instructions: {ex.instructions}")
        if ex.sets:
            lines.append(f"     Sets: {ex.sets}")
        if ex.duration:
            lines.append(f"     Duration: {ex.duration}")
        if ex.modification:
            lines.append(f"     Modification: {ex.modification}")
        lines.append("")
    return lines


def to_text(data: ExportData) -> str:
    profile = data.profile
    total = len(data.schedule)
    lines: List[str] = [
        RULE,
        "FITPATH WORKOUT PLAN".center(60).rstrip(),
        RULE,
        "",
        "PROFILE INFORMATION",
        SUB_RULE,
        f"Fitness Level: {_pretty(profile.fitness_level)}",
        f"Primary Goal: {_pretty(profile.goal)}",
        f"Available Equipment: {_pretty(profile.equipment)}",
        f"Weekly Commitment: {profile.weekly_days} days",
        f"Physical Limitations: {_limitations_text(profile)}",
        f"Generated Date: {data.generated_date.isoformat()}",
        "",
        "PROGRESS OVERVIEW",
        SUB_RULE,
        f"Completed Days: {len(data.completed_days)} / {total}",
        f"Completion Rate: {data.completion}%",
        "",
        f"{total}-DAY WORKOUT ROUTINE",
        RULE,
        "",
    ]
    for day in data.schedule:
        lines.extend(_day_lines(day, day.day in data.completed_days))
        lines.append("")
    lines.extend([
        RULE,
        "STAY CONSISTENT!".center(60).rstrip(),
        "YOUR FITNESS JOURNEY MATTERS".center(60).rstrip(),
        RULE,
    ])
    return "\n".join(lines) + "\n"


def to_csv(data: ExportData) -> bytes:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([
        "day",
        "title",
        "rest_day",
        "completed",
        "exercise",
        "instructions",
        "sets",
        "duration",
        "modification",
    ])
    for day in data.schedule:
        completed = "yes" if day.day in data.completed_days else "no"
        if day.is_rest_day:
            writer.writerow([day.day + 1, day.title, "yes", completed, "", day.description, "", "", ""])
            continue
        for ex in day.exercises or []:
            writer.writerow([
                day.day + 1,
                day.title,
                "no",
                completed,
                ex.name,
                ex.instructions,
                ex.sets or "",
                ex.duration or "",
                ex.modification or "",
            ])
    return output.getvalue().encode("utf-8")


def to_markdown(data: ExportData) -> str:
    profile = data.profile
    lines: List[str] = []
    lines.append(f"# FitPath Workout Plan ({profile.weekly_days} days per week)\n")
    lines.append(f"- Level: {profile.fitness_level}")
    lines.append(f"- Goal: {profile.goal}")
    lines.append(f"- Equipment: {profile.equipment}")
    lines.append(f"- Limitations: {', '.join(profile.limitations) or 'none'}")
    lines.append(f"- Progress: {len(data.completed_days)}/{len(data.schedule)} days ({data.completion}%)")
    for day in data.schedule:
        mark = " ✓" if day.day in data.completed_days else ""
        lines.append(f"\n## {day.title}{mark}")
        if day.is_rest_day:
            lines.append(f"_{day.description}_")
            continue
        for ex in day.exercises or []:
            dose = ex.sets or ex.duration or ""
            lines.append(f"- **{ex.name}** ({dose}): {ex.instructions}")
            if ex.modification:
                lines.append(f"  - Modification: {ex.modification}")
    return "\n".join(lines) + "\n"


def to_pdf(data: ExportData) -> bytes:
    """Render the plan as a simple paginated PDF."""
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    _, height = letter

    margin = 36
    x = margin
    y = height - margin

    def ensure_room(needed: float) -> None:
        nonlocal y
        if y < margin + needed:
            c.showPage()
            c.setFont("Helvetica", 10)
            y = height - margin

    c.setFont("Helvetica-Bold", 16)
    c.drawString(x, y, "FitPath Workout Plan")
    y -= 20
    c.setFont("Helvetica", 10)
    profile = data.profile
    c.drawString(
        x, y,
        f"{profile.fitness_level.title()} | {_pretty(profile.goal).title()} | "
        f"{_pretty(profile.equipment).title()} | {profile.weekly_days} days/week",
    )
    y -= 14
    c.drawString(x, y, f"Progress: {len(data.completed_days)}/{len(data.schedule)} days ({data.completion}%)")
    y -= 24

    for day in data.schedule:
        ensure_room(60)
        c.setFont("Helvetica-Bold", 12)
        status = " (done)" if day.day in data.completed_days else ""
        c.drawString(x, y, f"{day.title}{status}")
        y -= 16
        c.setFont("Helvetica", 10)
        if day.is_rest_day:
            c.drawString(x + 12, y, day.description or "")
            y -= 20
            continue
        for ex in day.exercises or []:
            line = f"- {ex.name} ({ex.sets or ex.duration}): {ex.instructions}"
            if ex.modification:
                line += f" [Modification: {ex.modification}]"
            # wrap long lines manually (simple)
            max_chars = 95
            parts = [line[i:i + max_chars] for i in range(0, len(line), max_chars)]
            for part in parts:
                ensure_room(24)
                c.drawString(x + 12, y, part)
                y -= 14
        y -= 6

    c.showPage()
    c.save()
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes


def share_message(profile: UserProfile) -> str:
    return (
        f"Check out my FitPath workout plan! {profile.goal.upper()} goal with "
        f"{profile.weekly_days} days per week."
    )


def email_body(data: ExportData) -> str:
    profile = data.profile
    return (
        "Check out my personalized workout plan from FitPath!\n\n"
        f"Fitness Level: {profile.fitness_level}\n"
        f"Goal: {profile.goal}\n"
        f"Weekly Commitment: {profile.weekly_days} days\n\n"
        f"Progress: {len(data.completed_days)}/{len(data.schedule)} days completed\n\n"
        "Keep me accountable!"
    )
