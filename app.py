from __future__ import annotations

import logging
from pathlib import Path

import uvicorn

from tts3cx.config import load_config
from tts3cx.server import create_app


def main() -> int:
    config_path = Path(__file__).with_name("config.yaml")
    config = load_config(config_path)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(config)
    uvicorn.run(app, host=config.server.host, port=config.server.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
