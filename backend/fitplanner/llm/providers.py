"""Provider clients, built once at startup and handed to the services.

`main.py` builds a `Providers` bundle in the app lifespan and stores it on
`app.state.providers`; route handlers get it via the `get_providers`
dependency. Tests build their own bundle from fakes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from elevenlabs.client import AsyncElevenLabs

from fitplanner.config import Settings

from .gemini import build_image_model, build_text_model

logger = logging.getLogger(__name__)


def build_speech_client(settings: Settings) -> AsyncElevenLabs | None:
    """ElevenLabs client, or None when no API key is configured."""
    if not settings.elevenlabs_api_key:
        logger.warning("ELEVENLABS_API_KEY not set; speech synthesis is disabled")
        return None
    return AsyncElevenLabs(api_key=settings.elevenlabs_api_key)


@dataclass
class Providers:
    settings: Settings
    image_model: Any = None
    text_model: Any = None
    speech_client: Any = None


def build_providers(settings: Settings) -> Providers:
    return Providers(
        settings=settings,
        image_model=build_image_model(settings),
        text_model=build_text_model(settings),
        speech_client=build_speech_client(settings),
    )
