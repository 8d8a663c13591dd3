"""
Runtime settings.

Loads .env from the repo root (python-dotenv, never overriding variables
already set in the shell), then reads:

  RATIOLENS_LOG_LEVEL     logging level name            (default INFO)
  RATIOLENS_CORS_ORIGINS  comma-separated origin list   (default local dev)
  EDINET_BASE_URL         EDINET API v2 base URL        (informational)
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Absolute path anchored to this file so it works regardless of CWD
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"

_DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = _DEFAULT_CORS_ORIGINS
    edinet_base_url: str = "https://disclosure.edinet-fsa.go.jp/api/v2"


def _split_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return _DEFAULT_CORS_ORIGINS
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@lru_cache
def get_settings() -> Settings:
    load_dotenv(_ENV_PATH, override=False)
    return Settings(
        log_level=os.environ.get("RATIOLENS_LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_origins(os.environ.get("RATIOLENS_CORS_ORIGINS")),
        edinet_base_url=os.environ.get("EDINET_BASE_URL", Settings.edinet_base_url),
    )
