"""Fitness Planner AI backend: plan images, narration, PDF export and quotes."""
