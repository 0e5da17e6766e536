import pytest
from helpers.wav_utils import pcm16_wav, sine_pcm16

from tts3cx.config import AppConfig


@pytest.fixture
def sine_wav_24k() -> bytes:
    """100 ms of a 1 kHz tone, 16-bit mono @ 24 kHz."""
    return pcm16_wav(sine_pcm16(1000.0, 24000, 2400), 24000)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()
