"""Exercise/meal illustration with an ordered chain of image sources.

Gemini is tried first; if it fails or returns no inline image, a
Pollinations URL is handed back instead. If the chain itself breaks, a
fixed stock photo is returned. Only a missing prompt or a missing Gemini
key reach the caller as errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import quote

from fitplanner.llm.gemini import parse_gemini_response
from fitplanner.schemas.media import ImageResult

from .errors import ImageConfigurationError, ImageValidationError

logger = logging.getLogger(__name__)

POLLINATIONS_BASE_URL = "https://image.pollinations.ai/prompt/"
POLLINATIONS_SIZE = 512

STATIC_FALLBACK_IMAGES = {
    "exercise": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=600&q=80",
    "meal": "https://images.unsplash.com/photo-1512621776951-a57141f2eefd?w=600&q=80",
}

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def static_fallback() -> ImageResult:
    # The requested category is not consulted here; clients have always
    # received the exercise photo from this path.
    return ImageResult(
        method="static-fallback", imageUrl=STATIC_FALLBACK_IMAGES["exercise"]
    )


def build_primary_prompt(subject: str, category: str | None) -> str:
    if category == "exercise":
        return (
            f"Professional fitness photograph: {subject}. "
            "Realistic lighting, gym or home environment, proper form."
        )
    return (
        f"Professional food photograph: {subject}. "
        "Appetizing, clean background, vivid colors."
    )


def build_fallback_prompt(subject: str, category: str | None) -> str:
    if category == "exercise":
        return f"professional fitness photo, {subject}"
    return f"professional food photo, {subject}"


def pollinations_url(prompt: str) -> str:
    encoded = quote(prompt, safe=_URI_COMPONENT_SAFE)
    return (
        f"{POLLINATIONS_BASE_URL}{encoded}"
        f"?width={POLLINATIONS_SIZE}&height={POLLINATIONS_SIZE}&nologo=true"
    )


# ============================================
# Strategies
# ============================================


@dataclass(frozen=True)
class StrategyOutcome:
    image_url: str | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.image_url is not None

    @classmethod
    def succeeded(cls, image_url: str) -> StrategyOutcome:
        return cls(image_url=image_url)

    @classmethod
    def soft_failure(cls, reason: str) -> StrategyOutcome:
        return cls(reason=reason)


class ImageStrategy(Protocol):
    name: str

    async def attempt(self, subject: str, category: str) -> StrategyOutcome: ...


class GeminiImageStrategy:
    name = "gemini-sdk"

    def __init__(self, model: Any):
        self._model = model

    async def attempt(self, subject: str, category: str) -> StrategyOutcome:
        logger.info("Generating image via Gemini for %r (%s)", subject, category)
        try:
            response = await self._model.generate_content_async(
                build_primary_prompt(subject, category)
            )
            payload = parse_gemini_response(response).first_inline_image()
        except Exception as e:
            logger.warning("Gemini image generation failed for %r", subject, exc_info=True)
            return StrategyOutcome.soft_failure(f"gemini error: {e}")

        if not payload:
            logger.warning("No inline image in Gemini response for %r", subject)
            return StrategyOutcome.soft_failure("no inline image in response")
        return StrategyOutcome.succeeded(f"data:image/png;base64,{payload}")


class PollinationsStrategy:
    """Templated URL on the free Pollinations service.

    The URL is returned without checking that it resolves.
    """

    name = "pollinations"

    async def attempt(self, subject: str, category: str) -> StrategyOutcome:
        logger.info("Using Pollinations fallback for %r", subject)
        return StrategyOutcome.succeeded(
            pollinations_url(build_fallback_prompt(subject, category))
        )


# ============================================
# Orchestrator
# ============================================


class ImageGenerator:
    def __init__(self, image_model: Any, strategies: list[ImageStrategy] | None = None):
        self._image_model = image_model
        if strategies is None:
            strategies = [GeminiImageStrategy(image_model), PollinationsStrategy()]
        self._strategies = strategies

    async def generate(self, subject: str, category: str = "exercise") -> ImageResult:
        """Return an image for `subject`, degrading through the strategy chain.

        Raises:
            ImageValidationError: empty subject.
            ImageConfigurationError: no Gemini model configured.
        """
        if not subject:
            raise ImageValidationError("Prompt is required")
        if self._image_model is None:
            raise ImageConfigurationError("Gemini API key missing")

        try:
            for strategy in self._strategies:
                outcome = await strategy.attempt(subject, category)
                if outcome.ok:
                    return ImageResult(method=strategy.name, imageUrl=outcome.image_url)
                logger.info("Strategy %s gave no image: %s", strategy.name, outcome.reason)
        except Exception:
            logger.exception("Image strategy chain crashed for %r", subject)
        else:
            logger.warning("All image strategies exhausted for %r", subject)

        return static_fallback()
