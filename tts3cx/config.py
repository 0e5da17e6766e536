from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass(frozen=True)
class UpstreamConfig:
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-4o-mini-tts"
    api_key_env: str = "OPENAI_API_KEY"
    format_field: str = "response_format"  # response_format | format
    timeout_sec: float = 60.0

    def api_key(self) -> Optional[str]:
        return os.environ.get(self.api_key_env) or None


@dataclass(frozen=True)
class OutputConfig:
    sample_rate: int = 8000
    filename: str = "tts-3cx.wav"


@dataclass(frozen=True)
class RequestDefaults:
    voice: str = "alloy"
    speed: float = 1.0


@dataclass(frozen=True)
class AppConfig:
    log_level: str = "INFO"
    server: ServerConfig = ServerConfig()
    upstream: UpstreamConfig = UpstreamConfig()
    output: OutputConfig = OutputConfig()
    defaults: RequestDefaults = RequestDefaults()


def _get(d: dict[str, Any], key: str, default: Any) -> Any:
    value = d.get(key, default)
    return default if value is None else value


def load_config(path: Path) -> AppConfig:
    path = Path(path)
    if not path.exists():
        return AppConfig()

    try:
        import yaml  # type: ignore
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("PyYAML is required to read config.yaml") from exc

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        return AppConfig()

    server_raw = raw.get("server", {}) or {}
    upstream_raw = raw.get("upstream", {}) or {}
    output_raw = raw.get("output", {}) or {}
    defaults_raw = raw.get("defaults", {}) or {}

    format_field = str(_get(upstream_raw, "format_field", "response_format"))
    if format_field not in {"response_format", "format"}:
        raise ValueError(f"upstream.format_field must be 'response_format' or 'format', got {format_field!r}")

    sample_rate = int(_get(output_raw, "sample_rate", 8000))
    if sample_rate <= 0:
        raise ValueError(f"output.sample_rate must be positive, got {sample_rate}")

    return AppConfig(
        log_level=str(_get(raw, "log_level", "INFO")).upper(),
        server=ServerConfig(
            host=str(_get(server_raw, "host", "0.0.0.0")),
            port=int(_get(server_raw, "port", 8000)),
        ),
        upstream=UpstreamConfig(
            base_url=str(_get(upstream_raw, "base_url", "https://api.openai.com/v1")).rstrip("/"),
            model=str(_get(upstream_raw, "model", "gpt-4o-mini-tts")),
            api_key_env=str(_get(upstream_raw, "api_key_env", "OPENAI_API_KEY")),
            format_field=format_field,
            timeout_sec=float(_get(upstream_raw, "timeout_sec", 60.0)),
        ),
        output=OutputConfig(
            sample_rate=sample_rate,
            filename=str(_get(output_raw, "filename", "tts-3cx.wav")),
        ),
        defaults=RequestDefaults(
            voice=str(_get(defaults_raw, "voice", "alloy")),
            speed=float(_get(defaults_raw, "speed", 1.0)),
        ),
    )
