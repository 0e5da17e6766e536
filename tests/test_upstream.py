import asyncio
import json

import httpx
import pytest

from tts3cx.config import UpstreamConfig
from tts3cx.errors import UpstreamError
from tts3cx.upstream import SpeechClient


def _run(coro):
    return asyncio.run(coro)


def test_synthesize_posts_expected_request():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, content=b"RIFF....WAVE")

    client = SpeechClient(UpstreamConfig(), api_key="sk-test", transport=httpx.MockTransport(handler))
    audio = _run(client.synthesize("hello", voice="nova", speed=1.25))

    assert audio == b"RIFF....WAVE"
    assert seen["url"] == "https://api.openai.com/v1/audio/speech"
    assert seen["auth"] == "Bearer sk-test"
    assert seen["body"] == {
        "model": "gpt-4o-mini-tts",
        "input": "hello",
        "voice": "nova",
        "speed": 1.25,
        "response_format": "wav",
    }


def test_format_field_is_configurable():
    client = SpeechClient(UpstreamConfig(format_field="format"), api_key="k")
    payload = client.build_payload("hi", voice="alloy", speed=1.0)
    assert payload["format"] == "wav"
    assert "response_format" not in payload


def test_error_status_raises_upstream_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(401, text="bad key"))
    client = SpeechClient(UpstreamConfig(), api_key="k", transport=transport)
    with pytest.raises(UpstreamError) as info:
        _run(client.synthesize("hi", voice="alloy", speed=1.0))
    assert info.value.status == 401
    assert info.value.message == "bad key"


def test_missing_api_key(monkeypatch):
    monkeypatch.delenv("TTS3CX_TEST_KEY", raising=False)
    client = SpeechClient(UpstreamConfig(api_key_env="TTS3CX_TEST_KEY"))
    with pytest.raises(RuntimeError, match="TTS3CX_TEST_KEY"):
        _run(client.synthesize("hi", voice="alloy", speed=1.0))
