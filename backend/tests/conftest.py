"""Pytest configuration: puts backend/ on sys.path."""

import os
import sys

import pytest

backend_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)

from fitplanner.config import Settings  # noqa: E402


@pytest.fixture
def settings():
    return Settings(
        gemini_api_key="test-gemini-key",
        elevenlabs_api_key="test-elevenlabs-key",
    )


@pytest.fixture
def sample_plan():
    from fitplanner.schemas.plan import FitnessPlan

    return FitnessPlan.model_validate(
        {
            "workoutPlan": {
                "overview": "Three full-body sessions per week.",
                "weeklySchedule": [
                    {
                        "day": "Monday",
                        "duration": "45 minutes",
                        "exercises": [
                            {
                                "name": "Goblet Squat",
                                "sets": 3,
                                "reps": "10-12",
                                "restTime": "60 seconds",
                                "instructions": "Keep your chest up.",
                            },
                            {"name": "Plank", "sets": 3},
                        ],
                    }
                ],
            },
            "dietPlan": {
                "overview": "High protein, moderate carbs.",
                "dailyMeals": [
                    {
                        "day": "Monday",
                        "breakfast": {
                            "name": "Oatmeal with berries",
                            "ingredients": ["oats", "blueberries", "milk"],
                            "calories": 350,
                        },
                        "dinner": {"name": "Grilled salmon", "calories": "520"},
                    }
                ],
            },
            "tips": ["Drink water.", "Sleep 8 hours."],
        }
    )
