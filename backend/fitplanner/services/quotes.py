"""Short motivational quote for the plan page."""

from __future__ import annotations

import logging
from typing import Any

from fitplanner.llm.gemini import parse_gemini_response
from fitplanner.schemas.media import QuoteResult

logger = logging.getLogger(__name__)

FALLBACK_QUOTE = "Consistency Always beats the Odds!"

QUOTE_PROMPT = (
    "Write one short, original motivational quote about fitness, training or "
    "healthy eating. Maximum 20 words. Reply with the quote only, no author, "
    "no quotation marks."
)


class QuoteService:
    def __init__(self, text_model: Any):
        self._text_model = text_model

    async def fetch(self) -> QuoteResult:
        """Ask the text model for a quote; fall back to a fixed one on any failure."""
        if self._text_model is None:
            return QuoteResult(quote=FALLBACK_QUOTE)

        try:
            response = await self._text_model.generate_content_async(QUOTE_PROMPT)
            text = parse_gemini_response(response).first_text()
        except Exception:
            logger.warning("Quote generation failed", exc_info=True)
            return QuoteResult(quote=FALLBACK_QUOTE)

        quote = text.strip().strip('"“”').strip()
        if not quote:
            logger.warning("Empty quote from model; using fallback")
            return QuoteResult(quote=FALLBACK_QUOTE)
        return QuoteResult(quote=quote)
