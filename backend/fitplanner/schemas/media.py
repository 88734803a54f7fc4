from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from .plan import FitnessPlan

ImageMethod = Literal["gemini-sdk", "pollinations", "static-fallback"]
NarrationSection = Literal["workout", "diet", "both"]


class ImageRequest(BaseModel):
    # Empty defaults so a missing prompt is reported as a 400, not a 422.
    prompt: str | None = ""
    # "exercise" or "meal"; anything other than "exercise" is framed as food.
    type: str | None = "exercise"


class ImageResult(BaseModel):
    success: bool = True
    method: ImageMethod
    imageUrl: str


class SpeechRequest(BaseModel):
    text: str | None = ""
    # Provider voice id, passed through as-is; None means the configured default.
    voice: str | None = None


class PlanSpeechRequest(BaseModel):
    plan: FitnessPlan
    section: NarrationSection = "both"
    voice: str | None = None


class SpeechResult(BaseModel):
    audioUrl: str


class QuoteResult(BaseModel):
    success: bool = True
    quote: str
