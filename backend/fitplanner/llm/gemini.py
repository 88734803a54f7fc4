"""Gemini model construction and a typed view of generate-content responses.

The SDK hands back protobuf-backed response objects. Rather than probing
them for attributes, the handlers validate `response.to_dict()` against the
small schema below and read optional fields from it.
"""

from __future__ import annotations

import logging
from typing import Any

import google.generativeai as genai
from pydantic import AliasChoices, BaseModel, Field

from fitplanner.config import Settings

logger = logging.getLogger(__name__)


def _configure(settings: Settings) -> bool:
    if not settings.gemini_api_key:
        return False
    genai.configure(api_key=settings.gemini_api_key)
    return True


def build_image_model(settings: Settings) -> genai.GenerativeModel | None:
    """Image-capable model, or None when no Gemini key is configured."""
    if not _configure(settings):
        logger.warning("GOOGLE_GEMINI_API_KEY not set; image generation is disabled")
        return None
    return genai.GenerativeModel(settings.gemini_image_model)


def build_text_model(settings: Settings) -> genai.GenerativeModel | None:
    if not _configure(settings):
        return None
    return genai.GenerativeModel(settings.gemini_text_model)


# ============================================
# Response schema
# ============================================


class InlineData(BaseModel):
    mime_type: str | None = Field(
        default=None, validation_alias=AliasChoices("mime_type", "mimeType")
    )
    # Base64 text, as produced by the protobuf JSON mapping of `bytes`.
    data: str = ""


class Part(BaseModel):
    text: str | None = None
    inline_data: InlineData | None = Field(
        default=None, validation_alias=AliasChoices("inline_data", "inlineData")
    )


class Content(BaseModel):
    role: str | None = None
    parts: list[Part] = []


class Candidate(BaseModel):
    content: Content | None = None


class GeminiResponse(BaseModel):
    candidates: list[Candidate] = []

    def _first_parts(self) -> list[Part]:
        if not self.candidates or self.candidates[0].content is None:
            return []
        return self.candidates[0].content.parts

    def first_inline_image(self) -> str | None:
        """Base64 payload of the first part carrying inline data, if any."""
        for part in self._first_parts():
            if part.inline_data is not None and part.inline_data.data:
                return part.inline_data.data
        return None

    def first_text(self) -> str:
        return "".join(part.text for part in self._first_parts() if part.text)


def parse_gemini_response(response: Any) -> GeminiResponse:
    """Validate an SDK response (or an already-plain dict) against the schema."""
    raw = response if isinstance(response, dict) else response.to_dict()
    return GeminiResponse.model_validate(raw)
