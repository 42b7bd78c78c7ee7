"""Runtime settings, read from the environment once at startup.

A ``.env`` file in the working directory is honoured; variables already
present in the process environment take precedence over it.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .gate import CACHE_DURATION
from .numbers_client import DEFAULT_BASE_URL, FETCH_TIMEOUT
from .state_store import DEFAULT_STATE_PATH
from .window import WINDOW_SIZE

DEFAULT_PORT = 9876
VALID_SERIES_IDS = frozenset({"p", "f", "e", "r"})
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or default).strip().upper()
    # canonicalise aliases such as WARN and FATAL
    level = logging.getLevelName(raw)
    canonical = logging.getLevelName(level) if isinstance(level, int) else raw
    if canonical not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return canonical


@dataclass(frozen=True)
class Settings:
    access_token: str = ""
    upstream_base_url: str = DEFAULT_BASE_URL
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    window_size: int = WINDOW_SIZE
    cache_duration: float = CACHE_DURATION
    fetch_timeout: float = FETCH_TIMEOUT
    state_path: str = DEFAULT_STATE_PATH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        window_size = _env_int("WINDOW_SIZE", WINDOW_SIZE)
        if window_size < 1:
            raise ValueError("WINDOW_SIZE must be at least 1")
        return cls(
            access_token=os.getenv("ACCESS_TOKEN", ""),
            upstream_base_url=os.getenv("UPSTREAM_BASE_URL", DEFAULT_BASE_URL),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", DEFAULT_PORT),
            window_size=window_size,
            cache_duration=_env_int("CACHE_DURATION_MS", int(CACHE_DURATION * 1000)) / 1000.0,
            fetch_timeout=_env_int("FETCH_TIMEOUT_MS", int(FETCH_TIMEOUT * 1000)) / 1000.0,
            state_path=os.getenv("STATE_PATH", DEFAULT_STATE_PATH),
            log_level=_env_log_level("LOG_LEVEL", "INFO"),
        )
