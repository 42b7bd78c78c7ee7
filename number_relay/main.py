import logging

import uvicorn

from .app import create_app
from .config import Settings
from .gate import CacheGate
from .numbers_client import NumbersClient
from .relay import NumberRelay
from .state_store import StateStore


def build_relay(settings: Settings) -> NumberRelay:
    return NumberRelay(
        store=StateStore(settings.state_path),
        client=NumbersClient(
            access_token=settings.access_token,
            base_url=settings.upstream_base_url,
            timeout=settings.fetch_timeout,
        ),
        gate=CacheGate(duration=settings.cache_duration),
        window_size=settings.window_size,
    )


def main() -> int:
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    app = create_app(build_relay(settings))
    logging.info("Server is running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
