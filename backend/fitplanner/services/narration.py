"""Turn a fitness plan into plain sentences for text-to-speech."""

from __future__ import annotations

from fitplanner.schemas.plan import DietPlan, FitnessPlan, WorkoutPlan


def _or_na(value) -> str:
    if value is None or value == "":
        return "N/A"
    return str(value)


def workout_narration(workout: WorkoutPlan) -> str:
    parts: list[str] = []
    if workout.overview:
        parts.append(workout.overview)

    for day in workout.weeklySchedule:
        if not day.day:
            continue
        intro = f"{day.day}."
        if day.duration:
            intro = f"{day.day}, about {day.duration}."
        parts.append(intro)
        for exercise in day.exercises:
            if not exercise.name:
                continue
            parts.append(
                f"{exercise.name}: {_or_na(exercise.sets)} sets of "
                f"{_or_na(exercise.reps)} reps, rest {_or_na(exercise.restTime)}."
            )
            if exercise.instructions:
                parts.append(exercise.instructions)

    if not parts:
        return ""
    return "Here is your workout plan. " + " ".join(parts)


def diet_narration(diet: DietPlan) -> str:
    parts: list[str] = []
    if diet.overview:
        parts.append(diet.overview)

    for day in diet.dailyMeals:
        if not day.day:
            continue
        parts.append(f"{day.day}.")
        for meal_type, meal in day.meals():
            sentence = f"For {meal_type}, {meal.name}"
            if meal.calories not in (None, ""):
                sentence += f", about {meal.calories} calories"
            parts.append(sentence + ".")

    if not parts:
        return ""
    return "Here is your diet plan. " + " ".join(parts)


def plan_narration(plan: FitnessPlan, section: str = "both") -> str:
    if section == "workout":
        return workout_narration(plan.workoutPlan)
    if section == "diet":
        return diet_narration(plan.dietPlan)
    sections = [workout_narration(plan.workoutPlan), diet_narration(plan.dietPlan)]
    return " ".join(text for text in sections if text)
