from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Tuple

from fitpath.models.exercise import Dosage, Exercise

ExerciseKey = Tuple[str, str]  # (fitness_level, goal)
TitleKey = Tuple[str, str]  # (goal, equipment)

DEFAULT_EXERCISE_KEY: ExerciseKey = ("beginner", "general-health")
DEFAULT_TITLE_KEY: TitleKey = ("general-health", "none")

reps = Dosage.reps
timed = Dosage.timed


# Workout day names cycle through each list by day index.
WORKOUT_TITLES: Dict[TitleKey, List[str]] = {
    ("weight-loss", "none"): ["Full Body Cardio", "Core & Cardio", "Lower Body Power", "Upper Body Blast"],
    ("weight-loss", "dumbbells"): ["Strength & Cardio", "Full Body Burn", "HIIT Weights", "Metabolic Conditioning"],
    ("weight-loss", "resistance-bands"): ["Band Cardio Flow", "Full Body Toning", "Resistance Circuit", "Band Power"],
    ("weight-loss", "both"): ["Hybrid Power", "Full Body Fusion", "Athletic Conditioning", "Ultimate Burn"],
    ("strength", "none"): ["Bodyweight Strength", "Upper Body Power", "Lower Body Build", "Core Foundation"],
    ("strength", "dumbbells"): ["Upper Body Focus", "Lower Body Power", "Full Body Strength", "Functional Fitness"],
    ("strength", "resistance-bands"): ["Band Resistance", "Progressive Tension", "Band Power Build", "Total Body Tone"],
    ("strength", "both"): ["Progressive Overload", "Power Building", "Strength Circuit", "Maximal Effort"],
    ("mobility", "none"): ["Flow & Stretch", "Joint Mobility", "Flexibility Focus", "Active Recovery"],
    ("mobility", "dumbbells"): ["Dynamic Mobility", "Strength & Stretch", "Functional Movement", "Recovery Strength"],
    ("mobility", "resistance-bands"): ["Band Stretching", "Mobility Flow", "Flexibility Bands", "Active Recovery"],
    ("mobility", "both"): ["Complete Mobility", "Dynamic Recovery", "Full Body Flow", "Restoration Day"],
    ("general-health", "none"): ["Balanced Fitness", "Wellness Circuit", "Energy Boost", "Health Foundation"],
    ("general-health", "dumbbells"): ["Total Health", "Balanced Strength", "Wellness Weights", "Energy Circuit"],
    ("general-health", "resistance-bands"): ["Health & Tone", "Wellness Bands", "Energy Flow", "Balance Training"],
    ("general-health", "both"): ["Complete Wellness", "Health Fusion", "Energy System", "Total Balance"],
}


# (name, instructions, dosage) rows; six per level/goal pair
EXERCISE_LIBRARY: Dict[ExerciseKey, List[Tuple[str, str, Dosage]]] = {
    ("beginner", "weight-loss"): [
        ("Marching in Place", "Lift knees alternately, keep core engaged", timed("2 minutes")),
        ("Wall Sit", "Slide down wall until knees are at 90 degrees", timed("30 seconds x 3")),
        ("Arm Circles", "Small circles forward, then backward", timed("1 minute each direction")),
        ("Step Touches", "Step side to side, add arm movements", timed("2 minutes")),
        ("Modified Plank", "Hold on knees or against wall", timed("20 seconds x 3")),
        ("Calf Raises", "Rise up on toes, lower slowly", reps("15 reps x 3")),
    ],
    ("beginner", "strength"): [
        ("Wall Push-ups", "Push against wall, keep body straight", reps("10 reps x 3")),
        ("Chair Squats", "Sit and stand without using hands", reps("10 reps x 3")),
        ("Glute Bridges", "Lie on back, lift hips", reps("12 reps x 3")),
        ("Standing Rows", "Pull arms back, squeeze shoulder blades", reps("12 reps x 3")),
        ("Calf Raises", "Rise up on toes", reps("15 reps x 3")),
        ("Side Leg Lifts", "Lift leg to side, keep straight", reps("10 each x 2")),
    ],
    ("beginner", "mobility"): [
        ("Cat-Cow Stretch", "Arch and round back slowly", timed("1 minute")),
        ("Shoulder Rolls", "Roll shoulders forward and backward", timed("30 seconds each")),
        ("Gentle Twists", "Rotate torso side to side", timed("1 minute")),
        ("Ankle Circles", "Rotate ankles in both directions", timed("30 seconds each")),
        ("Neck Stretches", "Gentle side bends and chin tucks", timed("1 minute")),
        ("Hip Circles", "Circle hips in both directions", timed("30 seconds each")),
    ],
    ("beginner", "general-health"): [
        ("Walking in Place", "Lift knees, swing arms naturally", timed("3 minutes")),
        ("Arm Raises", "Raise arms overhead and lower", reps("12 reps x 3")),
        ("Leg Swings", "Swing leg forward and back", reps("10 each x 2")),
        ("Torso Twists", "Rotate upper body side to side", timed("1 minute")),
        ("Deep Breathing", "Inhale deeply, exhale slowly", timed("2 minutes")),
        ("Heel Raises", "Rise onto balls of feet", reps("15 reps x 3")),
    ],
    ("intermediate", "weight-loss"): [
        ("Jumping Jacks", "Jump while spreading arms and legs", timed("45 seconds x 3")),
        ("Bodyweight Squats", "Lower to 90 degrees, keep chest up", reps("15 reps x 3")),
        ("Mountain Climbers", "Alternate knees to chest quickly", timed("30 seconds x 3")),
        ("Burpees", "Squat, jump back, push-up, jump up", reps("8 reps x 3")),
        ("High Knees", "Run in place bringing knees high", timed("30 seconds x 3")),
        ("Plank Jacks", "Plank position, jump feet apart and together", timed("30 seconds x 3")),
    ],
    ("intermediate", "strength"): [
        ("Push-ups", "Full push-ups or on knees", reps("10-15 reps x 3")),
        ("Lunges", "Step forward, lower back knee", reps("10 each x 3")),
        ("Plank", "Hold straight body position", timed("30-45 seconds x 3")),
        ("Dips", "Use chair or bench", reps("10-12 reps x 3")),
        ("Superman", "Lift chest and arms off floor", reps("12 reps x 3")),
        ("Side Plank", "Hold on each side", timed("20 seconds each x 2")),
    ],
    ("intermediate", "mobility"): [
        ("Sun Salutation Flow", "Flow through yoga sequence", timed("5 minutes")),
        ("Hip Flexor Stretch", "Kneeling lunge position", timed("30 seconds each")),
        ("Thoracic Rotation", "Rotate upper spine", timed("1 minute")),
        ("Dynamic Hamstring", "Swing leg forward and back", timed("30 seconds each")),
        ("Shoulder Mobility", "Arm circles and crosses", timed("2 minutes")),
        ("Ankle Mobility", "Rock forward and back", timed("1 minute each")),
    ],
    ("intermediate", "general-health"): [
        ("Brisk Walk in Place", "Quick pace with arm movement", timed("5 minutes")),
        ("Squat to Reach", "Squat and reach overhead", reps("12 reps x 3")),
        ("Modified Burpees", "Step back instead of jump", reps("8 reps x 3")),
        ("Arm Circles", "Large circles forward and back", timed("1 minute each")),
        ("Leg Swings", "Forward and side swings", timed("30 seconds each")),
        ("Core Rotation", "Standing twists with arm movement", timed("2 minutes")),
    ],
    ("advanced", "weight-loss"): [
        ("Burpee Variations", "Add push-up and tuck jump", reps("10 reps x 4")),
        ("Plyometric Lunges", "Jump between lunge positions", reps("8 each x 3")),
        ("Box Jumps", "Jump onto stable surface", reps("10 reps x 3")),
        ("Sprint Intervals", "High intensity bursts", timed("30 seconds x 8")),
        ("Kettlebell Swings", "Hip hinge movement", reps("15 reps x 4")),
        ("Battle Ropes", "Alternating waves", timed("30 seconds x 4")),
    ],
    ("advanced", "strength"): [
        ("Pistol Squats", "Single leg squat", reps("5 each x 3")),
        ("Handstand Push-ups", "Against wall or freestanding", reps("5-8 reps x 3")),
        ("Muscle-ups", "Pull-up to dip transition", reps("3-5 reps x 3")),
        ("One-arm Push-ups", "Wide base, tight core", reps("3-5 each x 3")),
        ("Front Levers", "Hold horizontal position", timed("10 seconds x 3")),
        ("Planche Push-ups", "Advanced bodyweight skill", reps("3-5 reps x 3")),
    ],
    ("advanced", "mobility"): [
        ("Advanced Yoga Flow", "Complex pose sequences", timed("10 minutes")),
        ("Gymnastics Stretching", "Dynamic flexibility work", timed("15 minutes")),
        ("Contortion Prep", "Extreme range of motion", timed("20 minutes")),
        ("Dynamic Movement", "Full body flow", timed("10 minutes")),
        ("Joint Preparation", "Advanced mobility drills", timed("15 minutes")),
        ("Recovery Protocol", "Active recovery techniques", timed("10 minutes")),
    ],
    ("advanced", "general-health"): [
        ("Complex Movement", "Multi-joint exercises", reps("12 reps x 4")),
        ("Athletic Drills", "Sport-specific movements", timed("10 minutes")),
        ("Functional Fitness", "Real-world movements", reps("15 reps x 3")),
        ("Power Development", "Explosive movements", reps("8 reps x 4")),
        ("Endurance Circuit", "Extended duration", timed("15 minutes")),
        ("Recovery Active", "Light movement", timed("10 minutes")),
    ],
}

if DEFAULT_EXERCISE_KEY not in EXERCISE_LIBRARY or DEFAULT_TITLE_KEY not in WORKOUT_TITLES:
    raise RuntimeError("Catalog is missing its fallback entries.")


@lru_cache(maxsize=None)
def _templates(key: ExerciseKey) -> Tuple[Exercise, ...]:
    rows = EXERCISE_LIBRARY[key]
    return tuple(Exercise(name=name, instructions=instr, dosage=dosage) for name, instr, dosage in rows)


def get_exercises(fitness_level: str, goal: str) -> List[Exercise]:
    """Return the six exercise templates for a level/goal pair.
    Unknown pairs fall back to the beginner general-health workout.
    Each call hands out fresh copies the caller may annotate.
    """
    key = (fitness_level, goal)
    if key not in EXERCISE_LIBRARY:
        key = DEFAULT_EXERCISE_KEY
    return [ex.model_copy(deep=True) for ex in _templates(key)]


def get_workout_titles(goal: str, equipment: str) -> List[str]:
    """Return the four workout titles for a goal/equipment pair, with the same fallback rule."""
    titles = WORKOUT_TITLES.get((goal, equipment)) or WORKOUT_TITLES[DEFAULT_TITLE_KEY]
    return list(titles)


def all_exercise_names() -> List[str]:
    names: set[str] = set()
    for rows in EXERCISE_LIBRARY.values():
        for name, _, _ in rows:
            names.add(name)
    return sorted(names)
