__all__ = [
    "AudioFormat",
    "DecodedAudio",
    "FormatError",
    "UnsupportedFormatError",
    "WaveFormat",
    "decode_wav",
    "encode_pcm16_wav",
    "resample_linear",
    "to_telephony_wav",
]

from tts3cx.audio.wav_reader import decode_wav
from tts3cx.audio.wav_writer import encode_pcm16_wav
from tts3cx.dsp.resample import resample_linear
from tts3cx.errors import FormatError, UnsupportedFormatError
from tts3cx.pipeline import to_telephony_wav
from tts3cx.types import AudioFormat, DecodedAudio, WaveFormat
