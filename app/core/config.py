import os
from pathlib import Path
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

from team_generator import constants

# Load environment variables from a local .env file if present.
# __file__ is app/core/config.py -> parents[2] is the project root.
PROJECT_ENV = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(PROJECT_ENV)


def _env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean from the environment with sensible defaults."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str] | None = None) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default or []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _cors_origins() -> List[str]:
    """Any CORS_ORIGINS override plus local dev hosts; permissive (*) when unset."""
    base_local = ["http://localhost:8000", "http://127.0.0.1:8000"]
    env_origins = _env_list("CORS_ORIGINS", [])
    merged = (env_origins or ["*"]) + base_local

    seen = set()
    deduped = []
    for origin in merged:
        if origin in seen:
            continue
        seen.add(origin)
        deduped.append(origin)
    return deduped


@dataclass
class Settings:
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Pokemon Team Randomizer API"))
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "/api"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    cors_origins: List[str] = field(default_factory=_cors_origins)
    pokeapi_base_url: str = field(default_factory=lambda: os.getenv("POKEAPI_BASE_URL", constants.POKEAPI_BASE_URL))
    fetch_timeout_seconds: float = field(
        default_factory=lambda: _env_float("FETCH_TIMEOUT_SECONDS", constants.FETCH_TIMEOUT_SECONDS)
    )
    max_attempts: int = field(default_factory=lambda: _env_int("MAX_ATTEMPTS", constants.MAX_ATTEMPTS))
    allow_network: bool = field(default_factory=lambda: _env_bool("ALLOW_NETWORK", True))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings instance sourced from environment variables."""
    return Settings()
