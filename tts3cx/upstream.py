from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from tts3cx.config import UpstreamConfig
from tts3cx.errors import UpstreamError

logger = logging.getLogger(__name__)


class SpeechClient:
    """Calls an OpenAI-compatible ``/audio/speech`` endpoint and returns WAV bytes."""

    def __init__(
        self,
        config: UpstreamConfig,
        *,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._api_key = api_key
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/audio/speech"

    def build_payload(self, text: str, *, voice: str, speed: float) -> dict[str, Any]:
        return {
            "model": self._config.model,
            "input": text,
            "voice": voice,
            "speed": speed,
            self._config.format_field: "wav",
        }

    async def synthesize(self, text: str, *, voice: str, speed: float) -> bytes:
        api_key = self._api_key or self._config.api_key()
        if not api_key:
            raise RuntimeError(f"{self._config.api_key_env} is not set")

        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        payload = self.build_payload(text, voice=voice, speed=speed)

        async with httpx.AsyncClient(timeout=self._config.timeout_sec, transport=self._transport) as client:
            resp = await client.post(self.url, json=payload, headers=headers)

        if not resp.is_success:
            logger.warning("Speech API returned %d for voice=%s", resp.status_code, voice)
            raise UpstreamError(resp.status_code, resp.text)

        return resp.content
