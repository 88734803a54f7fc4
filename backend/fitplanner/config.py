"""Runtime settings read from the environment (and `.env` via python-dotenv)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_TTS_MODEL = "eleven_turbo_v2"
DEFAULT_VOICE_ID = "Sm1seazb4gs7RSlUVw7c"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None = None
    gemini_image_model: str = DEFAULT_IMAGE_MODEL
    gemini_text_model: str = DEFAULT_TEXT_MODEL
    elevenlabs_api_key: str | None = None
    elevenlabs_model_id: str = DEFAULT_TTS_MODEL
    default_voice_id: str = DEFAULT_VOICE_ID
    frontend_url: str = ""


def load_settings() -> Settings:
    """Read settings once at startup.

    Missing credentials come back as None; the handlers decide how that
    surfaces to callers.
    """
    load_dotenv()
    return Settings(
        gemini_api_key=os.getenv("GOOGLE_GEMINI_API_KEY") or None,
        gemini_image_model=os.getenv("GEMINI_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
        gemini_text_model=os.getenv("GEMINI_TEXT_MODEL", DEFAULT_TEXT_MODEL),
        elevenlabs_api_key=os.getenv("ELEVENLABS_API_KEY") or None,
        elevenlabs_model_id=os.getenv("ELEVENLABS_MODEL_ID", DEFAULT_TTS_MODEL),
        default_voice_id=os.getenv("DEFAULT_VOICE_ID", DEFAULT_VOICE_ID),
        frontend_url=os.getenv("FRONTEND_URL", ""),
    )
