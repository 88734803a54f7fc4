"""Plan narration audio via ElevenLabs.

Unlike image generation there is no fallback: every provider failure is
reported to the caller as a synthesis error.
"""

from __future__ import annotations

import base64
import inspect
import logging
from collections.abc import Iterable
from typing import Any

from fitplanner.config import Settings
from fitplanner.schemas.media import SpeechResult

from .errors import SpeechConfigurationError, SpeechSynthesisError, SpeechValidationError

logger = logging.getLogger(__name__)

AUDIO_MIME_TYPE = "audio/mp3"


def encode_audio_data_uri(chunks: Iterable[bytes]) -> str:
    """Concatenate chunks in order and wrap them in an audio data URI."""
    audio = b"".join(chunks)
    return f"data:{AUDIO_MIME_TYPE};base64,{base64.b64encode(audio).decode('ascii')}"


class SpeechSynthesizer:
    def __init__(self, client: Any, settings: Settings):
        self._client = client
        self._settings = settings

    async def _collect(self, text: str, voice_id: str) -> list[bytes]:
        stream = self._client.text_to_speech.convert(
            voice_id=voice_id,
            text=text,
            model_id=self._settings.elevenlabs_model_id,
        )
        # Some SDK releases return a coroutine resolving to the stream.
        if inspect.isawaitable(stream):
            stream = await stream

        chunks: list[bytes] = []
        async for chunk in stream:
            chunks.append(chunk)
        return chunks

    async def synthesize(self, text: str, voice_id: str | None = None) -> SpeechResult:
        if not text or not text.strip():
            raise SpeechValidationError("No text provided")
        if self._client is None:
            raise SpeechConfigurationError("Missing ElevenLabs API key")

        voice_id = voice_id or self._settings.default_voice_id
        logger.info("Synthesizing %d characters with voice %s", len(text), voice_id)
        try:
            chunks = await self._collect(text, voice_id)
            audio_url = encode_audio_data_uri(chunks)
        except Exception as e:
            logger.exception("TTS generation failed")
            raise SpeechSynthesisError(str(e)) from e

        logger.info("Synthesized %d audio chunks", len(chunks))
        return SpeechResult(audioUrl=audio_url)
