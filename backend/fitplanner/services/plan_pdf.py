"""Render a fitness plan as a downloadable PDF (fpdf2)."""

from __future__ import annotations

import logging

from fpdf import FPDF

from fitplanner.schemas.plan import FitnessPlan

from .errors import PdfExportError

logger = logging.getLogger(__name__)

PDF_FILENAME = "fitness-plan-detailed.pdf"


# Common typographic characters LLM-written plans use that Latin-1 lacks.
_TRANSLITERATIONS = str.maketrans(
    {
        "\u2022": "-",  # bullet
        "\u2013": "-",  # en dash
        "\u2014": "-",  # em dash
        "\u2212": "-",  # minus
        "\u2018": "'",
        "\u2019": "'",
        "\u201c": '"',
        "\u201d": '"',
        "\u2026": "...",
        "\u2192": "->",
        "\u2264": "<=",
        "\u2265": ">=",
    }
)


def _latin1(text: str) -> str:
    """Transliterate for the core PDF fonts, which only cover Latin-1.

    Anything without a mapping (emoji, CJK) becomes "?".
    """
    text = text.translate(_TRANSLITERATIONS)
    return text.encode("latin-1", "replace").decode("latin-1")


def _or_na(value) -> str:
    return "N/A" if value in (None, "") else str(value)


class PlanPDF(FPDF):
    def __init__(self):
        super().__init__()
        self.set_auto_page_break(auto=True, margin=15)
        self.set_margins(20, 20, 20)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(128, 128, 128)
        self.cell(0, 10, f"Page {self.page_no()}", align="C")

    def add_text(self, text: str | None, size: int = 12, bold: bool = False):
        if not text:
            return
        self.set_font("Helvetica", "B" if bold else "", size)
        self.set_text_color(0, 0, 0)
        self.multi_cell(0, 7, _latin1(text), new_x="LMARGIN", new_y="NEXT")
        self.ln(1)


def render_plan_pdf(plan: FitnessPlan) -> bytes:
    """Build the PDF document for `plan` and return its bytes."""
    try:
        pdf = PlanPDF()
        pdf.add_page()
        pdf.add_text("Fitness Planner AI", 24, bold=True)
        pdf.add_text("Personalized Fitness Plan", 16, bold=True)
        pdf.ln(8)

        workout = plan.workoutPlan
        pdf.add_text("WORKOUT PLAN", 18, bold=True)
        pdf.add_text(workout.overview)
        pdf.ln(4)
        for day in workout.weeklySchedule:
            if not day.day:
                continue
            pdf.add_text(f"{day.day.upper()} - {_or_na(day.duration)}", 14, bold=True)
            for exercise in day.exercises:
                if not exercise.name:
                    continue
                pdf.add_text(f"- {exercise.name}", 12, bold=True)
                pdf.add_text(
                    f"  {_or_na(exercise.sets)} sets × {_or_na(exercise.reps)} reps", 11
                )
                pdf.add_text(f"  Rest: {_or_na(exercise.restTime)}", 11)
                if exercise.instructions:
                    pdf.add_text(f"  {exercise.instructions}", 11)
            pdf.ln(4)

        diet = plan.dietPlan
        pdf.ln(8)
        pdf.add_text("DIET PLAN", 18, bold=True)
        pdf.add_text(diet.overview)
        pdf.ln(4)
        for day in diet.dailyMeals:
            if not day.day:
                continue
            pdf.add_text(day.day.upper(), 14, bold=True)
            for meal_type, meal in day.meals():
                pdf.add_text(f"{meal_type.upper()}: {meal.name}", 12, bold=True)
                for ingredient in meal.ingredients:
                    pdf.add_text(f"  - {ingredient}", 11)
                if meal.calories not in (None, ""):
                    pdf.add_text(f"  Calories: {meal.calories}", 11)
            pdf.ln(4)

        tips = [tip for tip in plan.tips if tip]
        if tips:
            pdf.ln(8)
            pdf.add_text("TIPS & RECOMMENDATIONS", 18, bold=True)
            for index, tip in enumerate(tips, start=1):
                pdf.add_text(f"{index}. {tip}")

        return bytes(pdf.output())
    except Exception as e:
        logger.exception("PDF export failed")
        raise PdfExportError(str(e)) from e
