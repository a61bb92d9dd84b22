from __future__ import annotations

import random
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel

MessageType = Literal["motivation", "tip", "celebration", "rest"]


class CoachMessage(BaseModel):
    type: MessageType
    message: str


COACH_MESSAGES: Dict[MessageType, List[str]] = {
    "motivation": [
        "YOU'RE UNSTOPPABLE! Push through the discomfort!",
        "EVERY REP COUNTS! Build your dream body NOW!",
        "YOUR FUTURE SELF THANKS YOU! Keep going!",
        "FORM OVER SPEED! Quality creates results!",
        "REMEMBER YOUR WHY! Goals are within reach!",
    ],
    "tip": [
        "HYDRATE NOW! Water between sets = better performance!",
        "BREATHE RIGHT! Exhale effort, inhale recovery!",
        "REST SMART! 30-60 seconds for optimal growth!",
        "CORE ENGAGED! Every exercise needs stability!",
        "PROGRESSIVE OVERLOAD! Increase intensity gradually!",
    ],
    "celebration": [
        "ABSOLUTELY CRUSHING IT! You're a BEAST!",
        "WORKOUT COMPLETE! One step closer to GREATNESS!",
        "INCREDIBLE CONSISTENCY! Dedication pays off!",
        "YOU'RE ON FIRE! This commitment is RARE!",
        "BEAST MODE ACTIVATED! You're UNSTOPPABLE!",
    ],
    "rest": [
        "REST DAY IS CRUCIAL! Muscles grow when you recover!",
        "HYDRATE & PREPARE! Tomorrow's workout awaits!",
        "RECOVERY IS MAGIC! Embrace the rest!",
    ],
}


def pick_coach_message(
    is_workout_day: bool,
    has_completed_today: bool,
    rng: Optional[random.Random] = None,
) -> CoachMessage:
    """Pick a message for the day viewer.
    Completed days get a celebration, workout days motivation or a tip, rest days a recovery note.
    """
    rnd = rng or random.Random()
    if has_completed_today:
        return CoachMessage(type="celebration", message=rnd.choice(COACH_MESSAGES["celebration"]))
    if is_workout_day:
        pool = [("motivation", m) for m in COACH_MESSAGES["motivation"]]
        pool += [("tip", m) for m in COACH_MESSAGES["tip"]]
        kind, text = rnd.choice(pool)
        return CoachMessage(type=kind, message=text)  # type: ignore[arg-type]
    return CoachMessage(type="rest", message=rnd.choice(COACH_MESSAGES["rest"]))
