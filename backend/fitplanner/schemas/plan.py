from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel

# The plan comes from an LLM-backed generator; every field is optional and
# numbers may arrive as strings ("8-12" reps, "450 kcal").

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snacks")


class Exercise(BaseModel):
    name: str | None = None
    sets: int | str | None = None
    reps: int | str | None = None
    restTime: str | None = None
    instructions: str | None = None


class WorkoutDay(BaseModel):
    day: str | None = None
    duration: str | None = None
    exercises: list[Exercise] = []


class WorkoutPlan(BaseModel):
    overview: str | None = None
    weeklySchedule: list[WorkoutDay] = []


class Meal(BaseModel):
    name: str | None = None
    ingredients: list[str] = []
    calories: int | float | str | None = None


class MealDay(BaseModel):
    day: str | None = None
    breakfast: Meal | None = None
    lunch: Meal | None = None
    dinner: Meal | None = None
    snacks: Meal | None = None

    def meals(self) -> Iterator[tuple[str, Meal]]:
        """(meal_type, meal) pairs in serving order, skipping unnamed meals."""
        for meal_type in MEAL_TYPES:
            meal = getattr(self, meal_type)
            if meal is not None and meal.name:
                yield meal_type, meal


class DietPlan(BaseModel):
    overview: str | None = None
    dailyMeals: list[MealDay] = []


class FitnessPlan(BaseModel):
    workoutPlan: WorkoutPlan = WorkoutPlan()
    dietPlan: DietPlan = DietPlan()
    tips: list[str] = []
