from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from tts3cx.config import AppConfig
from tts3cx.errors import UpstreamError
from tts3cx.pipeline import to_telephony_wav
from tts3cx.upstream import SpeechClient

logger = logging.getLogger(__name__)


def _text_response(message: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def create_app(config: Optional[AppConfig] = None, *, client: Optional[SpeechClient] = None) -> FastAPI:
    config = config or AppConfig()
    app = FastAPI(title="tts3cx")
    app.state.config = config
    app.state.speech_client = client or SpeechClient(config.upstream)

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {"ok": True}

    @app.post("/api/tts")
    async def tts(request: Request) -> Response:
        cfg: AppConfig = request.app.state.config
        speech: SpeechClient = request.app.state.speech_client
        try:
            body = await request.json()
            if not isinstance(body, dict):
                body = {}

            text = body.get("text")
            if not isinstance(text, str) or not text.strip():
                return _text_response("Missing text", 400)

            voice = cfg.defaults.voice if body.get("voice") is None else str(body["voice"])
            speed = body.get("speed")
            speed = float(cfg.defaults.speed if speed is None else speed)

            wav = await speech.synthesize(text, voice=voice, speed=speed)
            out = await run_in_threadpool(to_telephony_wav, wav, target_sr=cfg.output.sample_rate)
        except UpstreamError as exc:
            return _text_response(exc.message or f"Upstream error ({exc.status})", exc.status)
        except Exception as exc:
            logger.exception("TTS conversion failed")
            return _text_response(str(exc) or "Server error", 500)

        return Response(
            content=out,
            media_type="audio/wav",
            headers={
                "Content-Disposition": f'attachment; filename="{cfg.output.filename}"',
                "Cache-Control": "no-store",
            },
        )

    return app
