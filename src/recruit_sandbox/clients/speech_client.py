"""Text-to-speech wrapper around the OpenAI speech endpoint."""

from __future__ import annotations

import logging
import os

import openai
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_random_exponential

from recruit_sandbox.errors import ConfigurationError, EmptyAudioError, TransportError

logger = logging.getLogger(__name__)

# MIME type per response_format, for client-side playback.
AUDIO_MIME_TYPES = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "opus": "audio/ogg",
    "aac": "audio/aac",
    "flac": "audio/flac",
}


class SpeechClient:
    """Async speech synthesis client."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model: str = "gpt-4o-mini-tts",
        voice: str = "coral",
        response_format: str = "wav",
        timeout: float | None = None,
    ):
        key = api_key or os.environ.get("OPENAI_API_KEY")
        if not key:
            raise ConfigurationError(
                "OpenAI API key required for speech. Set OPENAI_API_KEY env var or pass api_key."
            )
        kwargs: dict = {"api_key": key, "max_retries": 0}
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = openai.AsyncOpenAI(**kwargs)
        self.model = model
        self.voice = voice
        self.response_format = response_format
        self._char_count = 0

    @property
    def mime_type(self) -> str:
        return AUDIO_MIME_TYPES.get(self.response_format, "application/octet-stream")

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_random_exponential(multiplier=0.5, max=10),
        retry=retry_if_exception_type((openai.APIConnectionError, openai.RateLimitError)),
        reraise=True,
    )
    async def _call_api(self, text: str):
        return await self.client.audio.speech.create(
            model=self.model,
            voice=self.voice,
            input=text,
            response_format=self.response_format,
        )

    async def synthesize(self, text: str) -> bytes:
        """Synthesize ``text`` and return encoded audio bytes.

        Raises:
            EmptyAudioError: if the response carries no audio.
            TransportError: on network or provider failure.
        """
        logger.debug("Speech call: model=%s voice=%s chars=%d", self.model, self.voice, len(text))
        try:
            response = await self._call_api(text)
        except openai.OpenAIError as e:
            logger.error("Speech call failed", exc_info=True)
            raise TransportError(f"Speech request failed: {e}") from e
        audio = response.content
        if not audio:
            raise EmptyAudioError("Speech response contained no audio")
        self._char_count += len(text)
        return audio

    def get_char_count(self) -> int:
        """Return accumulated synthesized characters and reset the counter."""
        count = self._char_count
        self._char_count = 0
        return count
